from .term_colors import ANSI_NAMES, EXTENDED_NAMES, TermColors
from .theme_colors import DiffColors, ThemeColors
from .theme import Theme
from .loader import (
    colors_from_dict,
    colors_to_dict,
    load_theme_json,
    theme_from_dict,
    theme_to_dict,
)

__all__ = [
    "ANSI_NAMES",
    "EXTENDED_NAMES",
    "DiffColors",
    "TermColors",
    "Theme",
    "ThemeColors",
    "colors_from_dict",
    "colors_to_dict",
    "load_theme_json",
    "theme_from_dict",
    "theme_to_dict",
]
