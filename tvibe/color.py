import colorsys
import math
from collections import namedtuple

from .errors import MalformedColor

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def _clamp(v, lo=0.0, hi=1.0):
    return max(lo, min(hi, v))


def _round_u8(v):
    """Scale a 0..1 channel to 0..255, rounding half up."""
    return int(math.floor(v * 255 + 0.5))


class Color(namedtuple("Color", ["red", "green", "blue", "alpha"])):
    """Normalized RGBA color.

    Every channel is a float clamped to [0, 1]. Instances are immutable;
    all arithmetic returns a new Color.
    """

    __slots__ = ()

    def __new__(cls, red, green, blue, alpha=1.0):
        channels = (red, green, blue, alpha)
        if any(math.isnan(c) for c in channels):
            raise MalformedColor(channels)
        return super().__new__(cls, *(_clamp(float(c)) for c in channels))

    @classmethod
    def from_hex(cls, s):
        """Parse ``#rrggbb`` or ``#rrggbbaa`` (the ``#`` is optional).

        Raises:
            MalformedColor: wrong length or non-hex content
        """
        if not isinstance(s, str):
            raise MalformedColor(s)
        digits = s[1:] if s.startswith("#") else s
        if len(digits) not in (6, 8) or not set(digits) <= _HEX_DIGITS:
            raise MalformedColor(s)

        value = int(digits, 16)
        if len(digits) == 6:
            return cls.from_rgba8(
                (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF
            )
        return cls.from_rgba8(
            (value >> 24) & 0xFF,
            (value >> 16) & 0xFF,
            (value >> 8) & 0xFF,
            (value & 0xFF) / 255,
        )

    @classmethod
    def from_rgba8(cls, r, g, b, a=1.0):
        """Create from 0-255 RGB channels and a 0.0-1.0 alpha."""
        return cls(r / 255, g / 255, b / 255, a)

    @classmethod
    def from_hsv(cls, h, s, v, a=1.0):
        """Create from hue in degrees and saturation/value in percent.

        Hue wraps modulo 360, saturation and value are clamped to 0-100.
        """
        h = h % 360
        s = _clamp(s, 0, 100) / 100
        v = _clamp(v, 0, 100) / 100
        r, g, b = colorsys.hsv_to_rgb(h / 360, s, v)
        return cls(r, g, b, a)

    def to_hex(self, with_alpha=False):
        """Integer value, 0xRRGGBB or 0xRRGGBBAA."""
        rgb = (
            (_round_u8(self.red) << 16)
            | (_round_u8(self.green) << 8)
            | _round_u8(self.blue)
        )
        if with_alpha:
            return (rgb << 8) | _round_u8(self.alpha)
        return rgb

    def to_css(self, with_alpha=False):
        if with_alpha:
            return f"#{self.to_hex(True):08x}"
        return f"#{self.to_hex(False):06x}"

    def to_hsv(self):
        """Return (hue 0-360, saturation 0-100, value 0-100)."""
        h, s, v = colorsys.rgb_to_hsv(self.red, self.green, self.blue)
        return (h * 360, s * 100, v * 100)

    def blend(self, other, f):
        """Interpolate RGB toward ``other`` by ``f``. Alpha is kept.

        ``f`` is not clamped, values outside 0-1 extrapolate.
        """
        return Color(
            (other.red - self.red) * f + self.red,
            (other.green - self.green) * f + self.green,
            (other.blue - self.blue) * f + self.blue,
            self.alpha,
        )

    def shade(self, f):
        """Move toward white (f >= 0) or black (f < 0) by ``abs(f)``."""
        t = 0.0 if f < 0 else 1.0
        p = abs(f)
        return Color(
            (t - self.red) * p + self.red,
            (t - self.green) * p + self.green,
            (t - self.blue) * p + self.blue,
            self.alpha,
        )

    def brighten(self, v):
        """Add ``v`` percentage points to the HSV value channel."""
        h, s, val = self.to_hsv()
        return Color.from_hsv(h, s, _clamp(val + v, 0, 100), self.alpha)

    def luminance(self):
        """Relative luminance per WCAG 2.0"""

        def channel(c):
            return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4

        return (
            0.2126 * channel(self.red)
            + 0.7152 * channel(self.green)
            + 0.0722 * channel(self.blue)
        )

    def __str__(self):
        return self.to_css(False)


def parse_color(s, field=None):
    """Parse a hex color string, see :meth:`Color.from_hex`.

    ``field`` names where the string came from and is attached to the
    MalformedColor raised for it.
    """
    try:
        return Color.from_hex(s)
    except MalformedColor as e:
        if field is None:
            raise
        raise MalformedColor(s, field) from e


def contrast_ratio(lum1, lum2):
    """Calculate contrast ratio between two luminances"""
    lighter = max(lum1, lum2)
    darker = min(lum1, lum2)
    return (lighter + 0.05) / (darker + 0.05)
