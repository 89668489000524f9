"""Shape selection — decide how a value is rendered from its type alone.

Every renderable value falls into exactly one :class:`Shape`.  The
checks run in a fixed priority order so that no type matches twice:

1. ``str`` or ``UserString``         → :attr:`Shape.TEXT`
2. ``tuple``                      → :attr:`Shape.FIXED_TUPLE`
3. any other ordered sequence     → :attr:`Shape.SEQUENCE`
4. ``int`` (incl. fixed-width)    → :attr:`Shape.INTEGRAL`

Anything else is rejected with :class:`UnsupportedTypeError`.  There is
no fallback formatting.

:func:`validate` walks a whole value and raises before any rendering
happens, so a failed call never produces partial output.
"""

from __future__ import annotations

import enum
from collections import UserString
from collections.abc import Sequence

from print_ip.core.models import FixedWidthInt, check_same_type
from print_ip.exceptions import (
    HeterogeneousSequenceError,
    UnsupportedTypeError,
    describe_type,
)

INT32_MIN: int = -(1 << 31)
INT32_MAX: int = (1 << 31) - 1
INT64_MIN: int = -(1 << 63)
UINT64_MAX: int = (1 << 64) - 1


class Shape(enum.Enum):
    """Mutually exclusive rendering categories."""

    TEXT = "text"
    FIXED_TUPLE = "fixed-tuple"
    SEQUENCE = "sequence"
    INTEGRAL = "integral"


# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------

def classify(value: object) -> Shape:
    """Return the shape of *value*, looking only at its type.

    Raises
    ------
    UnsupportedTypeError
        If the type matches none of the four shapes.
    """
    cls = type(value)
    if issubclass(cls, (str, UserString)):
        return Shape.TEXT
    if issubclass(cls, tuple):
        return Shape.FIXED_TUPLE
    if issubclass(cls, Sequence):
        return Shape.SEQUENCE
    if issubclass(cls, int):
        return Shape.INTEGRAL
    raise UnsupportedTypeError(
        f"Cannot render a value of type {describe_type(value)}",
        hint="Supported: integers, str, tuples and ordered sequences.",
    )


def validate(value: object) -> Shape:
    """Classify *value* and check every nested element.

    Tuples and sequences must hold elements of one exact type, and each
    element must itself be renderable.

    Raises
    ------
    UnsupportedTypeError
        If *value* or any nested element has an unsupported type.
    HeterogeneousTupleError
        If a tuple mixes member types.
    HeterogeneousSequenceError
        If a sequence mixes element types.
    """
    shape = classify(value)
    if shape is Shape.FIXED_TUPLE:
        check_same_type(tuple(value))  # type: ignore[arg-type]
        for member in value:  # type: ignore[attr-defined]
            validate(member)
    elif shape is Shape.SEQUENCE:
        _check_sequence(value)  # type: ignore[arg-type]
        for element in value:  # type: ignore[attr-defined]
            _reject_self_similar(value, element)
            validate(element)
    return shape


def _check_sequence(elements: Sequence[object]) -> None:
    """Raise :class:`HeterogeneousSequenceError` on mixed element types."""
    expected: type | None = None
    for index, element in enumerate(elements):
        if expected is None:
            expected = type(element)
        elif type(element) is not expected:
            raise HeterogeneousSequenceError(
                f"Sequence element {index} is {describe_type(element)}, "
                f"expected {expected.__qualname__}",
                hint="All elements of a sequence must have the same type.",
            )


def _reject_self_similar(container: object, element: object) -> None:
    """Reject an element that repeats its own container.

    Walking such an element would never reach a text or integer leaf.
    """
    if type(element) is type(container) and (
        element is container or element == container
    ):
        raise UnsupportedTypeError(
            f"Cannot render {describe_type(container)}: "
            "it contains itself as an element",
            hint="Nested sequences must bottom out at text or integers.",
        )


# ---------------------------------------------------------------------------
# Integer width
# ---------------------------------------------------------------------------

def integer_width(value: int) -> int:
    """Return the byte width of an integral value.

    * Fixed-width integers report their declared width.
    * ``bool`` is one byte.
    * Plain ``int`` is four bytes when it fits a signed 32-bit integer,
      eight when it fits a 64-bit integer, otherwise the fewest bytes
      holding its two's-complement bit pattern.
    """
    if isinstance(value, FixedWidthInt):
        return value.WIDTH
    if isinstance(value, bool):
        return 1
    if INT32_MIN <= value <= INT32_MAX:
        return 4
    if INT64_MIN <= value <= UINT64_MAX:
        return 8
    if value < 0:
        return ((~value).bit_length() + 8) // 8
    return (value.bit_length() + 7) // 8


def is_signed(value: int) -> bool:
    """Return whether *value*'s type is signed."""
    if isinstance(value, FixedWidthInt):
        return value.SIGNED
    return not isinstance(value, bool)
