"""Numeric knobs that govern theme derivation.

Defaults:
- shade_factor 0.15: bright/dim ANSI tiers move 15% toward white/black
- comment_blend_factor 0.4: comments sit 40% of the way from bg to fg
- background_shade: HSV value offsets for bg slots 0, 2, 3, 4
- foreground_shade: HSV value offsets for fg slots 0, 2, 3
- selection_shade: HSV value offset for selection slot 1
- diff_blend: how far diff backgrounds lean toward green/red/blue/cyan
"""

from dataclasses import asdict, dataclass, field, replace

DEFAULT_SHADE_FACTOR = 0.15
DEFAULT_COMMENT_BLEND_FACTOR = 0.4

DEFAULT_BACKGROUND_SHADE = (-4.0, 6.0, 12.0, 23.0)
DEFAULT_FOREGROUND_SHADE = (6.0, -23.0, -46.0)
DEFAULT_SELECTION_SHADE = 16.0


@dataclass(frozen=True)
class DiffBlendConfig:
    add: float = 0.2
    delete: float = 0.2
    change: float = 0.2
    text: float = 0.3

    @classmethod
    def from_dict(cls, data):
        unknown = set(data) - set(cls.__dataclass_fields__)
        if unknown:
            raise ValueError(f"Unknown diff_blend keys: {sorted(unknown)}")
        return replace(cls(), **{k: float(v) for k, v in data.items()})


@dataclass(frozen=True)
class ThemeConfig:
    shade_factor: float = DEFAULT_SHADE_FACTOR
    comment_blend_factor: float = DEFAULT_COMMENT_BLEND_FACTOR
    background_shade: tuple = DEFAULT_BACKGROUND_SHADE
    foreground_shade: tuple = DEFAULT_FOREGROUND_SHADE
    selection_shade: float = DEFAULT_SELECTION_SHADE
    diff_blend: DiffBlendConfig = field(default_factory=DiffBlendConfig)

    def __post_init__(self):
        _check_offsets("background_shade", self.background_shade, 4)
        _check_offsets("foreground_shade", self.foreground_shade, 3)

    @classmethod
    def from_dict(cls, data):
        """Build a config from a partial mapping; missing keys keep defaults.

        Args:
            data: mapping as stored in theme JSON, or None

        Returns:
            ThemeConfig
        """
        if not data:
            return cls()

        overrides = {}
        for key in ("shade_factor", "comment_blend_factor"):
            if key in data:
                overrides[key] = float(data[key])
        for key in ("background_shade", "foreground_shade"):
            if key in data:
                overrides[key] = tuple(float(v) for v in data[key])
        if "selection_shade" in data:
            value = data["selection_shade"]
            # Stored as a one-element list in older theme files
            if isinstance(value, (list, tuple)):
                if len(value) != 1:
                    raise ValueError(
                        f"selection_shade needs 1 offset, got {len(value)}"
                    )
                value = value[0]
            overrides["selection_shade"] = float(value)
        if "diff_blend" in data:
            overrides["diff_blend"] = DiffBlendConfig.from_dict(data["diff_blend"])

        unknown = set(data) - set(cls.__dataclass_fields__)
        if unknown:
            raise ValueError(f"Unknown theme config keys: {sorted(unknown)}")

        return cls(**overrides)

    def to_dict(self):
        data = asdict(self)
        data["background_shade"] = list(self.background_shade)
        data["foreground_shade"] = list(self.foreground_shade)
        return data


def _check_offsets(name, offsets, expected):
    if len(offsets) != expected:
        raise ValueError(f"{name} needs {expected} offsets, got {len(offsets)}")
