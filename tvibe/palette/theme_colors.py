import copy
import logging
from dataclasses import dataclass, field, fields

from ..color import parse_color
from ..config import ThemeConfig
from ..ramp import BackgroundRamp, ForegroundRamp, SelectionRamp
from .term_colors import TermColors

logger = logging.getLogger(__name__)

# Diff field -> ANSI channel the background is blended toward
DIFF_SOURCES = (
    ("add", "green"),
    ("delete", "red"),
    ("change", "blue"),
    ("text", "cyan"),
)


@dataclass
class DiffColors:
    add: str = None
    delete: str = None
    change: str = None
    text: str = None

    @classmethod
    def from_dict(cls, data):
        unknown = set(data) - set(cls.__dataclass_fields__)
        if unknown:
            raise ValueError(f"Unknown diff color keys: {sorted(unknown)}")
        return cls(**data)

    def to_dict(self):
        return {name: getattr(self, name) for name, _ in DIFF_SOURCES
                if getattr(self, name) is not None}

    def validate(self, field="diff"):
        for name, _ in DIFF_SOURCES:
            value = getattr(self, name)
            if value is not None:
                parse_color(value, f"{field}.{name}")


@dataclass
class ThemeColors:
    """Palette of a theme, partial until :meth:`prepare` has run."""

    base: TermColors = field(default_factory=TermColors)
    bright: TermColors = None
    dim: TermColors = None
    comment: str = None
    variable: str = None
    status_line: str = None
    background: BackgroundRamp = field(default_factory=BackgroundRamp)
    foreground: ForegroundRamp = field(default_factory=ForegroundRamp)
    selection: SelectionRamp = field(default_factory=SelectionRamp)
    diff: DiffColors = None

    def prepare(self, config=None):
        """Derive every missing color in place.

        Values already present are never overwritten. Steps run in a fixed
        order because later ones read what earlier ones produced:

        1. background, foreground and selection ramps
        2. bright tier = base shaded toward white by shade_factor
        3. dim tier = base shaded toward black by shade_factor
        4. diff colors = bg[1] blended toward green/red/blue/cyan
        5. comment = bg[1] blended toward fg[1] by comment_blend_factor
        6. variable = fg[1]
        7. status_line = bg[0]

        The work happens on a copy, so a failure leaves this palette as it
        was.

        Args:
            config: ThemeConfig, defaults when None

        Raises:
            MalformedColor: a color needed for derivation does not parse
            MissingBaseColor: a ramp has nothing to derive from
        """
        if config is None:
            config = ThemeConfig()

        work = copy.deepcopy(self)
        work._derive(config)
        for f in fields(self):
            setattr(self, f.name, getattr(work, f.name))

    def _derive(self, config):
        self.background.prepare(config.background_shade)
        self.foreground.prepare(config.foreground_shade)
        self.selection.prepare(config.selection_shade)

        shade = config.shade_factor
        if self.bright is None:
            self.bright = self.base.shade(shade)
            logger.debug("Derived bright tier with shade %.2f", shade)
        if self.dim is None:
            self.dim = self.base.shade(-shade)
            logger.debug("Derived dim tier with shade %.2f", -shade)

        bg = parse_color(self.background[1], "background[1]")
        fg_main = self.foreground[1]

        if self.diff is None:
            self.diff = DiffColors()
        for name, channel in DIFF_SOURCES:
            if getattr(self.diff, name) is None:
                target = parse_color(getattr(self.base, channel), f"base.{channel}")
                weight = getattr(config.diff_blend, name)
                setattr(self.diff, name, bg.blend(target, weight).to_css())

        if self.comment is None:
            fg = parse_color(fg_main, "foreground[1]")
            self.comment = bg.blend(fg, config.comment_blend_factor).to_css()
        if self.variable is None:
            self.variable = fg_main
        if self.status_line is None:
            self.status_line = self.background[0]

    def validate(self):
        """Re-parse every stored color, stopping at the first bad one.

        Raises:
            MalformedColor: with ``field`` naming the offending entry
        """
        self.base.validate("base")
        if self.bright is not None:
            self.bright.validate("bright")
        if self.dim is not None:
            self.dim.validate("dim")
        if self.diff is not None:
            self.diff.validate("diff")
        self.background.validate("background")
        self.foreground.validate("foreground")
        self.selection.validate("selection")
        for name in ("comment", "variable", "status_line"):
            value = getattr(self, name)
            if value is not None:
                parse_color(value, name)
