"""Terminal/editor theme engine: palette completion, theme lookup, export."""

from .color import Color, contrast_ratio, parse_color
from .config import DiffBlendConfig, ThemeConfig
from .errors import (
    EngineError,
    MalformedColor,
    MatchNotFound,
    MissingBaseColor,
    RampNotPrepared,
)
from .ramp import BackgroundRamp, ColorRamp, ForegroundRamp, SelectionRamp
from .palette import DiffColors, TermColors, Theme, ThemeColors
from .catalog import Catalog, default_catalog
from .resolve import random_dark, random_light, random_theme, search

__version__ = "0.3.0"
