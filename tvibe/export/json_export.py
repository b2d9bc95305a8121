import json
import logging

from ..palette import ANSI_NAMES, EXTENDED_NAMES

logger = logging.getLogger(__name__)


def flatten_palette(theme):
    """Flatten a prepared theme into ``{key: hex}``.

    Ramps become ``background_0`` .. ``background_4`` etc, ANSI channels keep
    their names with ``_bright`` / ``_dim`` siblings.

    Raises:
        RampNotPrepared: the theme has not been prepared
    """
    colors = theme.require_prepared().colors
    data = {}

    for name in ("background", "foreground", "selection"):
        for i, value in enumerate(getattr(colors, name).colors):
            data[f"{name}_{i}"] = value

    data["comment"] = colors.comment
    data["variable"] = colors.variable
    data["status_line"] = colors.status_line
    for key, value in colors.diff.to_dict().items():
        data[f"diff_{key}"] = value

    for suffix, tier in (("", colors.base), ("_bright", colors.bright), ("_dim", colors.dim)):
        for name in ANSI_NAMES + EXTENDED_NAMES:
            data[f"{name}{suffix}"] = tier.channel(name)

    return data


def export_json(theme, filepath):
    """Export a prepared theme as a flat palette JSON with metadata.

    Args:
        theme: prepared Theme
        filepath: Output file path
    """
    data = flatten_palette(theme)

    data["_name"] = theme.name
    data["_variant"] = theme.variant
    data["_note"] = (
        "30 terminal colors: black/red/green/yellow/blue/magenta/cyan/white/"
        "orange/pink with _bright and _dim variants"
    )

    with open(filepath, "w") as f:
        json.dump(data, f, indent=2)

    logger.debug("Wrote %d colors to %s", len(data) - 3, filepath)
