"""Error kinds reported by parsing and conversion."""

from dataclasses import dataclass
from enum import Enum

from coordinate_search.formats import CoordinateFormat


class ErrorKind(Enum):
    """Closed set of failures a parse or conversion can report."""

    UNKNOWN_FORMAT = "unknown_format"
    """Input matches none of the detectable coordinate shapes."""

    MALFORMED_COMPONENT = "malformed_component"
    """A format was detected but its detailed pattern did not match."""

    OUT_OF_RANGE_COMPONENT = "out_of_range_component"
    """Degrees, minutes or seconds outside their allowed range."""

    WRONG_COMPONENT_COUNT = "wrong_component_count"
    """Pair splitting did not yield exactly two components."""

    INVALID_CONVERSION_INPUT = "invalid_conversion_input"
    """Conversion or formatting invoked on an invalid or mismatched value."""


def _number(value: float) -> str:
    return f"{value:g}"


@dataclass(frozen=True)
class CoordinateError:
    """Structured description of a parse or conversion failure.

    Attributes:
        kind: Which failure occurred.
        format: Coordinate format detected when the failure happened, if any.
        component: Offending component ("degrees", "minutes", "seconds").
        value: Offending value (component value or segment count).
        bound: Limit the value violated.
        detail: Extra context for conversion failures.
    """

    kind: ErrorKind
    format: CoordinateFormat | None = None
    component: str | None = None
    value: float | None = None
    bound: float | None = None
    detail: str | None = None

    @property
    def message(self) -> str:
        """Human-readable message generated from the structured context."""
        if self.kind is ErrorKind.UNKNOWN_FORMAT:
            return "unknown coordinate format"

        if self.kind is ErrorKind.MALFORMED_COMPONENT:
            name = self.format.value if self.format is not None else "coordinate"
            return f"invalid {name} format"

        if self.kind is ErrorKind.OUT_OF_RANGE_COMPONENT:
            text = f"{self.component} out of range"
            if self.value is not None and self.bound is not None:
                limit = "at most" if self.component == "degrees" else "less than"
                text += f": {_number(self.value)} (must be {limit} {_number(self.bound)})"
            return text

        if self.kind is ErrorKind.WRONG_COMPONENT_COUNT:
            text = "expected two coordinate components (latitude, longitude)"
            if self.value is not None:
                text += f", got {int(self.value)}"
            return text

        text = "invalid conversion input"
        if self.detail:
            text += f": {self.detail}"
        return text

    def __str__(self) -> str:
        return self.message


class ConversionError(ValueError):
    """Raised when a converter or formatter receives a value it cannot handle.

    Args:
        error: Structured description of the rejected input.
    """

    def __init__(self, error: CoordinateError):
        super().__init__(error.message)
        self.error = error

    @classmethod
    def invalid_input(
        cls, detail: str, fmt: CoordinateFormat | None = None
    ) -> "ConversionError":
        """Build an INVALID_CONVERSION_INPUT error with the given detail."""
        return cls(
            CoordinateError(ErrorKind.INVALID_CONVERSION_INPUT, format=fmt, detail=detail)
        )
