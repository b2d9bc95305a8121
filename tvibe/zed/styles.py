from ..color import Color
from ..palette import ANSI_NAMES


def opacity_to_hex(opacity):
    """Convert 0.0-1.0 opacity to hex string (00-ff)."""
    clamped = max(0.0, min(1.0, opacity))
    return f"{int(clamped * 255):02x}"


def _hex(value, alpha="ff"):
    """Normalized ``#rrggbb`` + alpha suffix for a stored color string."""
    return f"{Color.from_hex(value).to_css()}{alpha}"


def _syntax(color, font_style=None):
    return {"color": color, "font_style": font_style, "font_weight": None}


def build_zed_style(colors, opacity=None):
    """Build the style dict for a Zed theme from a prepared palette.

    Args:
        colors: prepared ThemeColors
        opacity: Optional opacity value (0.0-1.0) for transparent blur theme.
                 If None, creates opaque theme (ff alpha).
    """
    bg = colors.background.colors
    fg = colors.foreground.colors
    sel = colors.selection.colors
    base, bright, dim = colors.base, colors.bright, colors.dim

    if opacity is not None:
        surface_alpha = opacity_to_hex(opacity)
        # Panels sit under the editor, so they get the lighter share
        panel_alpha = opacity_to_hex(opacity * 0.95)
        transparent_alpha = "00"
    else:
        surface_alpha = "ff"
        panel_alpha = "ff"
        transparent_alpha = "ff"

    style = {
        "border": _hex(bg[3]),
        "border.variant": _hex(bg[2]),
        "border.focused": _hex(sel[1]),
        "border.selected": _hex(sel[1]),
        "border.transparent": "#00000000",
        "border.disabled": _hex(bg[2]),
        "elevated_surface.background": _hex(bg[2], surface_alpha),
        "surface.background": _hex(bg[0], transparent_alpha),
        "background": _hex(bg[0], panel_alpha),
        "element.background": _hex(bg[2]),
        "element.hover": _hex(bg[3]),
        "element.active": _hex(bg[4]),
        "element.selected": _hex(bg[4]),
        "element.disabled": _hex(bg[2]),
        "drop_target.background": _hex(bg[3], "80"),
        "ghost_element.background": "#00000000",
        "ghost_element.hover": _hex(bg[3]),
        "ghost_element.active": _hex(bg[4]),
        "ghost_element.selected": _hex(bg[4]),
        "text": _hex(fg[1]),
        "text.muted": _hex(fg[2]),
        "text.placeholder": _hex(fg[3]),
        "text.disabled": _hex(fg[3]),
        "text.accent": _hex(base.blue),
        "icon": _hex(fg[1]),
        "icon.muted": _hex(fg[2]),
        "icon.disabled": _hex(fg[3]),
        "icon.accent": _hex(base.blue),
        "status_bar.background": _hex(colors.status_line, surface_alpha),
        "title_bar.background": _hex(colors.status_line, surface_alpha),
        "title_bar.inactive_background": _hex(bg[0], surface_alpha),
        "toolbar.background": _hex(bg[1], surface_alpha),
        "tab_bar.background": _hex(bg[0], panel_alpha),
        "tab.inactive_background": _hex(bg[0], panel_alpha),
        "tab.active_background": _hex(bg[1], surface_alpha),
        "search.match_background": _hex(sel[1], "66"),
        "panel.background": _hex(bg[0], transparent_alpha),
        "scrollbar.thumb.background": _hex(bg[3], "4c"),
        "scrollbar.thumb.hover_background": _hex(bg[4]),
        "scrollbar.track.background": "#00000000",
        "editor.foreground": _hex(fg[1]),
        "editor.background": _hex(bg[1], surface_alpha),
        "editor.gutter.background": _hex(bg[1], surface_alpha),
        "editor.subheader.background": _hex(bg[2], surface_alpha),
        "editor.active_line.background": _hex(bg[2], "bf"),
        "editor.highlighted_line.background": _hex(bg[2]),
        "editor.line_number": _hex(fg[3]),
        "editor.active_line_number": _hex(fg[0]),
        "editor.invisible": _hex(fg[3]),
        "editor.wrap_guide": _hex(bg[3], "0d"),
        "editor.active_wrap_guide": _hex(bg[3], "1a"),
        "editor.document_highlight.read_background": _hex(sel[0], "80"),
        "editor.document_highlight.write_background": _hex(sel[1], "66"),
        "terminal.background": _hex(bg[1], transparent_alpha),
        "terminal.foreground": _hex(fg[1]),
        "terminal.bright_foreground": _hex(fg[0]),
        "terminal.dim_foreground": _hex(fg[2]),
        "version_control.added": _hex(base.green),
        "version_control.modified": _hex(base.yellow),
        "version_control.deleted": _hex(base.red),
        "created": _hex(base.green),
        "created.background": _hex(colors.diff.add),
        "deleted": _hex(base.red),
        "deleted.background": _hex(colors.diff.delete),
        "modified": _hex(base.blue),
        "modified.background": _hex(colors.diff.change),
        "conflict": _hex(base.channel("orange")),
        "conflict.background": _hex(colors.diff.text),
        "error": _hex(base.red),
        "warning": _hex(base.yellow),
        "success": _hex(base.green),
        "info": _hex(base.cyan),
        "hint": _hex(colors.comment),
        "players": [
            {
                "cursor": _hex(fg[1]),
                "background": _hex(fg[1]),
                "selection": _hex(sel[0], "80"),
            },
        ],
    }

    for name in ANSI_NAMES:
        style[f"terminal.ansi.{name}"] = _hex(base.channel(name))
        style[f"terminal.ansi.bright_{name}"] = _hex(bright.channel(name))
        style[f"terminal.ansi.dim_{name}"] = _hex(dim.channel(name))

    style["syntax"] = {
        "attribute": _syntax(_hex(base.channel("orange"))),
        "boolean": _syntax(_hex(base.channel("orange"))),
        "comment": _syntax(_hex(colors.comment), "italic"),
        "comment.doc": _syntax(_hex(colors.comment), "italic"),
        "constant": _syntax(_hex(base.channel("orange"))),
        "function": _syntax(_hex(base.blue)),
        "keyword": _syntax(_hex(base.magenta)),
        "number": _syntax(_hex(base.channel("orange"))),
        "operator": _syntax(_hex(fg[2])),
        "property": _syntax(_hex(base.cyan)),
        "punctuation": _syntax(_hex(fg[2])),
        "string": _syntax(_hex(base.green)),
        "string.escape": _syntax(_hex(base.channel("pink"))),
        "tag": _syntax(_hex(base.channel("pink"))),
        "type": _syntax(_hex(base.yellow)),
        "variable": _syntax(_hex(colors.variable)),
        "variable.special": _syntax(_hex(base.red)),
    }

    if opacity is not None:
        style["background.appearance"] = "blurred"

    return style
