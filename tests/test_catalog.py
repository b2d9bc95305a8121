import pytest

from tvibe.palette import Theme


def test_catalog_size(catalog):
    assert len(catalog) == 56
    assert len(catalog.dark_names) == 45
    assert len(catalog.light_names) == 11


def test_names_are_sorted_and_partitioned(catalog):
    assert catalog.names == sorted(catalog.names)
    assert set(catalog.dark_names) | set(catalog.light_names) == set(catalog.names)
    assert not set(catalog.dark_names) & set(catalog.light_names)


def test_light_flag_decides_variant(catalog):
    assert "nightfox" in catalog.dark_names
    assert "ubuntu" in catalog.dark_names
    assert "paper" in catalog.light_names
    assert catalog.get("paper").variant == "light"


def test_get_returns_fresh_theme(catalog):
    first = catalog.get("gruvbox_dark")
    assert isinstance(first, Theme)
    assert first.name == "gruvbox_dark"
    first.prepare()
    assert not catalog.get("gruvbox_dark").prepared


def test_get_unknown_name(catalog):
    assert "nope" not in catalog
    with pytest.raises(KeyError):
        catalog.get("nope")


def test_theme_config_is_loaded(catalog):
    assert catalog.get("nordfox").config.diff_blend.text == 0.25
    assert catalog.get("gruvbox_dark").config.diff_blend.text == 0.3


@pytest.mark.parametrize("name", [
    "gruvbox_dark", "paper", "nightfox", "ubuntu", "tokyo_night", "rose_pine",
])
def test_catalog_theme_prepares_and_validates(catalog, name):
    theme = catalog.get(name).prepare().validate()
    assert len(theme.colors.background.colors) == 5
    assert len(theme.colors.foreground.colors) == 4
    assert len(theme.colors.selection.colors) == 2
    assert theme.colors.comment
    assert theme.colors.status_line


def test_every_catalog_theme_prepares(catalog):
    for name in catalog:
        catalog.get(name).prepare().validate()
