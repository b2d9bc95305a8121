"""Pick a catalog theme by fuzzy name or at random.

Names are scored against the query, lowest wins:

    0                                   exact (case-insensitive) match
    1                                   query is a substring of the name
    levenshtein(name, query) + len//10  otherwise, so shorter names win
                                        near-ties

Dark and light names are scored separately; the dark winner is kept when
both score the same.
"""

import logging

import numpy as np

from .catalog import default_catalog
from .errors import MatchNotFound

logger = logging.getLogger(__name__)


def levenshtein(a, b):
    """Edit distance between two strings.

    Works one row of the DP table at a time; insertions along a row are
    resolved with a running minimum instead of a Python inner loop.
    """
    if not a:
        return len(b)
    if not b:
        return len(a)

    n = len(b)
    b_codes = np.fromiter(map(ord, b), dtype=np.int64, count=n)
    idx = np.arange(n + 1, dtype=np.int64)
    prev = idx.copy()

    for i, ch in enumerate(a, 1):
        row = np.empty(n + 1, dtype=np.int64)
        row[0] = i
        # substitution (or match) and deletion
        row[1:] = np.minimum(prev[:-1] + (b_codes != ord(ch)), prev[1:] + 1)
        # insertion: row[j] = min(row[j], row[j-1] + 1) carried left to right
        prev = np.minimum.accumulate(row - idx) + idx

    return int(prev[-1])


def score(name, query):
    """Score ``name`` against an already lowercased ``query``."""
    name = name.lower()
    if name == query:
        return 0
    if query in name:
        return 1
    return levenshtein(name, query) + len(name) // 10


def best_match(query, names):
    """Return (name, score) of the best scoring name; first wins ties.

    Raises:
        MatchNotFound: ``names`` is empty
    """
    if not names:
        raise MatchNotFound(f"No candidates to match {query!r} against")
    query = query.lower()
    return min(((name, score(name, query)) for name in names), key=lambda m: m[1])


def search(query, catalog=None):
    """Resolve a free-text query to a catalog theme.

    Raises:
        MatchNotFound: the catalog is empty
    """
    if catalog is None:
        catalog = default_catalog()

    matches = [
        best_match(query, names)
        for names in (catalog.dark_names, catalog.light_names)
        if names
    ]
    if not matches:
        return _first(catalog)

    name, best = min(matches, key=lambda m: m[1])
    logger.debug("Query %r resolved to %s (score %d)", query, name, best)
    return catalog.get(name)


def random_theme(catalog=None, rng=None):
    """Any catalog theme, drawn uniformly.

    Args:
        catalog: Catalog, the bundled one when None
        rng: numpy Generator; pass ``np.random.default_rng(seed)`` for
            repeatable picks
    """
    if catalog is None:
        catalog = default_catalog()
    return _pick(catalog.names, catalog, rng)


def random_dark(catalog=None, rng=None):
    if catalog is None:
        catalog = default_catalog()
    return _pick(catalog.dark_names, catalog, rng)


def random_light(catalog=None, rng=None):
    if catalog is None:
        catalog = default_catalog()
    return _pick(catalog.light_names, catalog, rng)


def _pick(names, catalog, rng):
    if not names:
        return _first(catalog)
    if rng is None:
        rng = np.random.default_rng()
    name = names[int(rng.integers(len(names)))]
    logger.debug("Randomly picked %s out of %d", name, len(names))
    return catalog.get(name)


def _first(catalog):
    if not len(catalog):
        raise MatchNotFound("Theme catalog is empty")
    return catalog.get(catalog.names[0])
