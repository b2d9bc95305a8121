"""Bundled theme catalog.

``themes.json`` maps theme names to partial records. Records are turned into
fresh Theme objects on every lookup, because preparing a theme mutates it.

Every record is either light or dark: ``dark_names`` holds everything not
flagged ``light``, so a record without the flag (``ubuntu``) is searched and
picked as a dark theme.
"""

import json
from pathlib import Path

from ..palette import theme_from_dict

THEMES_PATH = Path(__file__).with_name("themes.json")


class Catalog:
    """Read-only collection of theme records keyed by name."""

    def __init__(self, records):
        self._records = dict(records)
        self.names = sorted(self._records)
        self.dark_names = [n for n in self.names if not self._records[n].get("light")]
        self.light_names = [n for n in self.names if self._records[n].get("light")]

    @classmethod
    def from_json(cls, json_path):
        with open(json_path) as f:
            return cls(json.load(f))

    def get(self, name):
        """Return a new, unprepared Theme for ``name``.

        Raises:
            KeyError: unknown theme name
        """
        return theme_from_dict(self._records[name], name=name)

    def __contains__(self, name):
        return name in self._records

    def __len__(self):
        return len(self._records)

    def __iter__(self):
        return iter(self.names)


def default_catalog():
    """Load the catalog shipped with the package."""
    return Catalog.from_json(THEMES_PATH)
