import json

import pytest

from tvibe.errors import RampNotPrepared
from tvibe.export import export_json, flatten_palette, generate_readability_report
from tvibe.palette import Theme
from tvibe.ramp import BackgroundRamp, ForegroundRamp
from tvibe.zed import build_zed_style, generate_zed_theme, opacity_to_hex


def test_flatten_palette_keys(gruvbox):
    data = flatten_palette(gruvbox)
    assert data["background_1"] == "#282828"
    assert data["foreground_1"] == "#ebdbb2"
    assert data["selection_1"] == "#504945"
    assert data["orange"] == "#fe8019"
    assert data["red_bright"] == "#fb4934"
    assert data["pink_dim"] == "#b04b78"
    assert data["status_line"] == "#3c3836"
    assert {"diff_add", "diff_delete", "diff_change", "diff_text"} <= set(data)
    assert len(data) == 48


def test_export_json(gruvbox, tmp_path):
    path = tmp_path / "palette.json"
    export_json(gruvbox, path)

    data = json.loads(path.read_text())
    assert data["_name"] == "gruvbox_dark"
    assert data["_variant"] == "dark"
    assert "_note" in data
    assert data["comment"] == "#7c6f64"


def test_renderers_need_prepared_theme():
    theme = Theme(name="raw")
    with pytest.raises(RampNotPrepared):
        flatten_palette(theme)
    with pytest.raises(RampNotPrepared):
        generate_zed_theme(theme)


def test_readability_report(gruvbox):
    report, issues = generate_readability_report(gruvbox)
    assert "READABILITY REPORT" in report
    assert "gruvbox_dark (DARK)" in report
    for key, hex_val, achieved, required in issues:
        assert achieved < required
        assert key in report


def test_readability_report_flags_low_contrast():
    theme = Theme(name="flat")
    theme.colors.background = BackgroundRamp("#808080")
    theme.colors.foreground = ForegroundRamp("#808080")
    theme.prepare()

    _, issues = generate_readability_report(theme)
    assert "foreground_1" in [key for key, *_ in issues]


@pytest.mark.parametrize("opacity, expected", [
    (1.0, "ff"),
    (0.0, "00"),
    (0.8, "cc"),
    (1.5, "ff"),
    (-1, "00"),
])
def test_opacity_to_hex(opacity, expected):
    assert opacity_to_hex(opacity) == expected


def test_zed_theme(gruvbox):
    data = json.loads(generate_zed_theme(gruvbox))
    assert data["name"] == "gruvbox_dark"
    theme = data["themes"][0]
    assert theme["appearance"] == "dark"

    style = theme["style"]
    assert style["editor.background"] == "#282828ff"
    assert style["terminal.ansi.red"] == "#cc241dff"
    assert style["terminal.ansi.bright_red"] == "#fb4934ff"
    assert style["terminal.ansi.dim_red"] == "#9d1f1aff"
    assert style["syntax"]["comment"]["color"] == "#7c6f64ff"
    assert "background.appearance" not in style


def test_zed_blur_theme(gruvbox):
    data = json.loads(generate_zed_theme(gruvbox, opacity=0.8))
    assert data["name"] == "gruvbox_dark Blur"
    style = data["themes"][0]["style"]
    assert style["background.appearance"] == "blurred"
    assert style["editor.background"] == "#282828cc"


def test_zed_style_light_theme(catalog):
    paper = catalog.get("paper").prepare()
    style = build_zed_style(paper.colors)
    assert style["text"] == "#000000ff"
    assert json.loads(generate_zed_theme(paper))["themes"][0]["appearance"] == "light"


def test_renderers_reject_filled_but_unprepared_theme(catalog):
    # every ramp slot is supplied, but prepare has not run
    theme = catalog.get("gruvbox_dark")
    assert theme.colors.background.is_prepared
    with pytest.raises(RampNotPrepared):
        flatten_palette(theme)
    with pytest.raises(RampNotPrepared):
        generate_readability_report(theme)
    with pytest.raises(RampNotPrepared):
        generate_zed_theme(theme)
