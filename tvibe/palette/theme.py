from dataclasses import dataclass, field

from ..config import ThemeConfig
from ..errors import RampNotPrepared
from .theme_colors import ThemeColors


@dataclass
class Theme:
    """A named palette with its derivation config.

    Built from catalog data (usually partial), completed once by
    :meth:`prepare`, then read by renderers.
    """

    name: str = None
    light: bool = False
    colors: ThemeColors = field(default_factory=ThemeColors)
    config: ThemeConfig = field(default_factory=ThemeConfig)
    prepared: bool = field(default=False, compare=False)

    @property
    def variant(self):
        return "light" if self.light else "dark"

    def prepare(self):
        """Complete the palette; see :meth:`ThemeColors.prepare`."""
        self.colors.prepare(self.config)
        self.prepared = True
        return self

    def require_prepared(self):
        """Raise RampNotPrepared unless :meth:`prepare` has run."""
        if not self.prepared:
            raise RampNotPrepared(self.name or "Theme")
        return self

    def validate(self):
        self.colors.validate()
        return self
