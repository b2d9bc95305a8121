import json

from .styles import build_zed_style


def generate_zed_theme(theme, opacity=None):
    """Generate a Zed theme JSON file for a prepared theme.

    Args:
        theme: prepared Theme
        opacity: Optional opacity (0.0-1.0). If set, creates blur theme.

    Returns:
        JSON string of the theme data
    """
    theme.require_prepared()
    is_blur_theme = opacity is not None
    name_suffix = " Blur" if is_blur_theme else ""

    theme_data = {
        "$schema": "https://zed.dev/schema/themes/v0.2.0.json",
        "name": f"{theme.name}{name_suffix}",
        "author": "tvibe",
        "themes": [
            {
                "name": f"{theme.name}{name_suffix}",
                "appearance": theme.variant,
                "style": build_zed_style(theme.colors, opacity=opacity),
            },
        ],
    }
    return json.dumps(theme_data, indent=2)
