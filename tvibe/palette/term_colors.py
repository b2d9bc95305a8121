from dataclasses import dataclass, fields

from ..color import parse_color
from ..config import DEFAULT_SHADE_FACTOR

ANSI_NAMES = ("black", "red", "green", "yellow", "blue", "magenta", "cyan", "white")
EXTENDED_NAMES = ("orange", "pink")

# Extended channels fall back to the closest ANSI channel
EXTENDED_FALLBACK = {"orange": "yellow", "pink": "red"}


@dataclass
class TermColors:
    """One tier of terminal colors: 8 ANSI channels plus orange and pink."""

    black: str = "#000000"
    red: str = "#ff0000"
    green: str = "#00ff00"
    yellow: str = "#ffff00"
    blue: str = "#0000ff"
    magenta: str = "#ff00ff"
    cyan: str = "#00ffff"
    white: str = "#ffffff"
    orange: str = None
    pink: str = None

    @classmethod
    def from_dict(cls, data):
        unknown = set(data) - set(ANSI_NAMES + EXTENDED_NAMES)
        if unknown:
            raise ValueError(f"Unknown terminal color keys: {sorted(unknown)}")
        missing = [name for name in ANSI_NAMES if name not in data]
        if missing:
            raise ValueError(f"Missing terminal colors: {missing}")
        return cls(**data)

    def to_dict(self):
        return {f.name: getattr(self, f.name) for f in fields(self)
                if getattr(self, f.name) is not None}

    def channel(self, name):
        """Color string for ``name``, resolving orange/pink fallbacks."""
        value = getattr(self, name)
        if value is None:
            value = getattr(self, EXTENDED_FALLBACK[name])
        return value

    def shade(self, factor=DEFAULT_SHADE_FACTOR):
        """Shade every channel toward white (factor >= 0) or black.

        Missing orange/pink are shaded from yellow/red, so the result always
        has all ten channels.

        Raises:
            MalformedColor: a channel does not parse
        """
        shaded = {}
        for name in ANSI_NAMES + EXTENDED_NAMES:
            value = self.channel(name)
            shaded[name] = parse_color(value, name).shade(factor).to_css()
        return TermColors(**shaded)

    def validate(self, field=None):
        for name in ANSI_NAMES + EXTENDED_NAMES:
            value = getattr(self, name)
            if value is None:
                continue
            parse_color(value, f"{field}.{name}" if field else name)
