"""Error types raised by the theme engine."""


class EngineError(Exception):
    """Base class for every theme engine failure."""


class MalformedColor(EngineError, ValueError):
    """A color string is not a 6 or 8 digit hex value."""

    def __init__(self, value, field=None):
        self.value = value
        self.field = field
        where = f" in {field}" if field else ""
        super().__init__(f"Malformed color{where}: {value!r}")


class MissingBaseColor(EngineError):
    """A ramp has no populated slot to derive the others from."""

    def __init__(self, ramp):
        self.ramp = ramp
        super().__init__(f"{ramp} base color not defined")


class RampNotPrepared(EngineError):
    """A ramp slot was read before the ramp was completed."""

    def __init__(self, ramp):
        self.ramp = ramp
        super().__init__(f"{ramp} not prepared")


class MatchNotFound(EngineError, LookupError):
    """No theme could be selected from an empty candidate pool."""
