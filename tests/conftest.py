import numpy as np
import pytest

from tvibe.catalog import Catalog, default_catalog


@pytest.fixture(scope="session")
def catalog():
    return default_catalog()


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def small_catalog():
    """Two dark themes and one light one, minimal records."""
    return Catalog({
        "alpha": {"light": False, "colors": {"background": "#101010"}},
        "beta": {"light": False, "colors": {"background": "#202020"}},
        "gamma": {"light": True, "colors": {"background": "#f0f0f0"}},
    })


@pytest.fixture
def gruvbox(catalog):
    return catalog.get("gruvbox_dark").prepare()
