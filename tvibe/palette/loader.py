import json
from pathlib import Path

from ..config import ThemeConfig
from ..ramp import BackgroundRamp, ForegroundRamp, SelectionRamp
from .term_colors import TermColors
from .theme import Theme
from .theme_colors import DiffColors, ThemeColors

_TIERS = ("base", "bright", "dim")
_SCALARS = ("comment", "variable", "status_line")
_RAMPS = {
    "background": BackgroundRamp,
    "foreground": ForegroundRamp,
    "selection": SelectionRamp,
}


def colors_from_dict(data):
    """Build ThemeColors from plain data, as stored in theme JSON.

    Ramps may be given as a single hex string or a list where empty strings
    (or nulls) mark slots to derive. Missing keys stay unset.
    """
    unknown = set(data) - set(_TIERS + _SCALARS + tuple(_RAMPS) + ("diff",))
    if unknown:
        raise ValueError(f"Unknown theme color keys: {sorted(unknown)}")

    colors = ThemeColors()
    for tier in _TIERS:
        if data.get(tier) is not None:
            setattr(colors, tier, TermColors.from_dict(data[tier]))
    for name in _SCALARS:
        setattr(colors, name, data.get(name))
    for name, ramp_cls in _RAMPS.items():
        setattr(colors, name, ramp_cls(data.get(name)))
    if data.get("diff") is not None:
        colors.diff = DiffColors.from_dict(data["diff"])
    return colors


def colors_to_dict(colors):
    """Inverse of :func:`colors_from_dict`; unset entries are omitted."""
    data = {"base": colors.base.to_dict()}
    for tier in ("bright", "dim"):
        value = getattr(colors, tier)
        if value is not None:
            data[tier] = value.to_dict()
    for name in _SCALARS:
        value = getattr(colors, name)
        if value is not None:
            data[name] = value
    for name in _RAMPS:
        value = getattr(colors, name).to_data()
        if value is not None:
            data[name] = value
    if colors.diff is not None:
        data["diff"] = colors.diff.to_dict()
    return data


def theme_from_dict(data, name=None):
    """Build a Theme from a record with ``light``, ``colors``, ``config``."""
    return Theme(
        name=data.get("name", name),
        light=bool(data.get("light", False)),
        colors=colors_from_dict(data.get("colors") or {}),
        config=ThemeConfig.from_dict(data.get("config")),
    )


def theme_to_dict(theme):
    data = {
        "name": theme.name,
        "light": theme.light,
        "colors": colors_to_dict(theme.colors),
    }
    if theme.config != ThemeConfig():
        data["config"] = theme.config.to_dict()
    return data


def load_theme_json(json_path):
    """Load a theme record from a JSON file.

    Args:
        json_path: Path to a theme JSON file (one catalog-style record)

    Returns:
        Theme, not yet prepared
    """
    with open(json_path) as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError(f"{json_path}: expected a JSON object")

    return theme_from_dict(data, name=Path(json_path).stem)
