"""Color ramps: fixed-size ordered shade sequences completed from partial input.

A ramp is in exactly one of three states:

- EMPTY: nothing supplied, the ramp falls back to its default color
- SINGLE: one anchor color supplied
- FILLED: every slot holds a color string (empty strings mark slots that
  still need deriving until ``prepare`` has run)

``prepare`` turns any ramp into a FILLED one without touching slots the
theme author supplied. Slots are only readable once every slot holds a color;
reading earlier raises RampNotPrepared instead of returning garbage.
"""

import logging
from enum import Enum

from .color import parse_color
from .config import (
    DEFAULT_BACKGROUND_SHADE,
    DEFAULT_FOREGROUND_SHADE,
    DEFAULT_SELECTION_SHADE,
)
from .errors import MissingBaseColor, RampNotPrepared

logger = logging.getLogger(__name__)

DEFAULT_BACKGROUND_COLOR = "#000000"
DEFAULT_FOREGROUND_COLOR = "#ffffff"
DEFAULT_SELECTION_COLOR = "#2a2a2a"


class RampState(Enum):
    EMPTY = "empty"
    SINGLE = "single"
    FILLED = "filled"


class ColorRamp:
    """Base ramp. Subclasses set the size, anchor slot and offset layout."""

    label = "Ramp"
    size = 0
    anchor = 1
    default_color = None
    default_offsets = ()

    def __init__(self, colors=None):
        self._single = None
        self._slots = None

        if colors is None:
            return
        if isinstance(colors, str):
            self._single = colors
            return

        slots = ["" if c is None else c for c in colors]
        if len(slots) != self.size:
            raise ValueError(
                f"{self.label} needs {self.size} colors, got {len(slots)}"
            )
        self._slots = slots

    @property
    def state(self):
        if self._slots is not None:
            return RampState.FILLED
        if self._single is not None:
            return RampState.SINGLE
        return RampState.EMPTY

    @property
    def is_prepared(self):
        return self.state is RampState.FILLED and all(self._slots)

    def derived_slots(self):
        """Slot indexes other than the anchor, in offset order."""
        return [i for i in range(self.size) if i != self.anchor]

    def slot_offsets(self, offsets=None):
        """Map each non-anchor slot to its HSV value offset."""
        if offsets is None:
            offsets = self.default_offsets
        offsets = tuple(offsets)
        slots = self.derived_slots()
        if len(offsets) != len(slots):
            raise ValueError(
                f"{self.label} needs {len(slots)} offsets, got {len(offsets)}"
            )
        return dict(zip(slots, offsets))

    def prepare(self, offsets=None):
        """Complete the ramp in place.

        Args:
            offsets: per-slot HSV value offsets, defaults to the ramp's own

        Raises:
            MissingBaseColor: no slot holds a color to derive from
            MalformedColor: the reference color does not parse
        """
        by_slot = self.slot_offsets(offsets)

        state = self.state
        if state is RampState.FILLED:
            slots = list(self._slots)
        else:
            single = self._single
            if state is RampState.EMPTY:
                logger.debug("%s empty, using default %s", self.label, self.default_color)
                single = self.default_color
            slots = [""] * self.size
            slots[self.anchor] = parse_color(single, self.label).to_css()

        found = next(((i, c) for i, c in enumerate(slots) if c), None)
        if found is None:
            raise MissingBaseColor(self.label)

        if not slots[self.anchor]:
            ref_index, ref = found
            slots[self.anchor] = parse_color(ref, f"{self.label}[{ref_index}]").brighten(
                -by_slot[ref_index]
            ).to_css()
            logger.debug(
                "%s anchor %s derived from slot %d",
                self.label,
                slots[self.anchor],
                ref_index,
            )

        # Derive from the stored (rounded) anchor, same as a supplied one
        base = parse_color(slots[self.anchor], f"{self.label}[{self.anchor}]")
        for i, offset in by_slot.items():
            if not slots[i]:
                slots[i] = base.brighten(offset).to_css()

        self._single = None
        self._slots = slots

    def index(self, i):
        if not self.is_prepared:
            raise RampNotPrepared(self.label)
        return self._slots[i]

    __getitem__ = index

    @property
    def colors(self):
        if not self.is_prepared:
            raise RampNotPrepared(self.label)
        return tuple(self._slots)

    def validate(self, field=None):
        field = field or self.label.lower()
        if self.state is RampState.SINGLE:
            parse_color(self._single, field)
        elif self.state is RampState.FILLED:
            for i, c in enumerate(self._slots):
                parse_color(c, f"{field}[{i}]")

    def to_data(self):
        if self.state is RampState.FILLED:
            return list(self._slots)
        return self._single

    def __len__(self):
        return self.size

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._single == other._single and self._slots == other._slots

    def __repr__(self):
        return f"{type(self).__name__}({self.to_data()!r})"


class BackgroundRamp(ColorRamp):
    """Five background shades; slot 1 is the main editor background."""

    label = "Background"
    size = 5
    default_color = DEFAULT_BACKGROUND_COLOR
    default_offsets = DEFAULT_BACKGROUND_SHADE


class ForegroundRamp(ColorRamp):
    """Four foreground shades; slot 1 is the main text color."""

    label = "Foreground"
    size = 4
    default_color = DEFAULT_FOREGROUND_COLOR
    default_offsets = DEFAULT_FOREGROUND_SHADE


class SelectionRamp(ColorRamp):
    """Two selection shades, the second derived from the first."""

    label = "Selection"
    size = 2
    anchor = 0
    default_color = DEFAULT_SELECTION_COLOR
    default_offsets = (DEFAULT_SELECTION_SHADE,)

    def slot_offsets(self, offsets=None):
        # A single scalar offset
        if isinstance(offsets, (int, float)):
            offsets = (offsets,)
        return super().slot_offsets(offsets)
