from .styles import build_zed_style, opacity_to_hex
from .theme import generate_zed_theme

__all__ = ["build_zed_style", "generate_zed_theme", "opacity_to_hex"]
