"""Value types for print-ip.

Python integers carry no byte width, and Python tuples carry no static
member types.  The types in this module supply both:

* :class:`FixedWidthInt` subclasses (``Int8`` … ``UInt64``) pin an
  integer to a byte width and signedness, checked at construction.
* :class:`HomogeneousTuple` rejects mixed member types at construction.

All instances are immutable and behave as the builtin they extend.
"""

from __future__ import annotations

from typing import ClassVar

from print_ip.exceptions import (
    HeterogeneousTupleError,
    IntegerRangeError,
    describe_type,
)


# ---------------------------------------------------------------------------
# Fixed-width integers
# ---------------------------------------------------------------------------

class FixedWidthInt(int):
    """An ``int`` with a static byte width and signedness.

    Subclasses set :attr:`WIDTH` and :attr:`SIGNED`.  The value is
    range-checked once, when the instance is created; arithmetic on
    instances yields plain ``int`` results.
    """

    __slots__ = ()

    WIDTH: ClassVar[int] = 0
    """Width in bytes.  Zero on the abstract base."""

    SIGNED: ClassVar[bool] = True
    """Whether the type uses two's-complement signed representation."""

    def __new__(cls, value: int = 0) -> FixedWidthInt:
        if cls.WIDTH < 1:
            raise TypeError(
                f"{cls.__name__} has no width; use a concrete subclass "
                "such as UInt32."
            )
        number = int(value)
        low, high = cls.min_value(), cls.max_value()
        if not low <= number <= high:
            raise IntegerRangeError(
                f"{number} does not fit {cls.__name__}",
                hint=f"{cls.__name__} accepts values from {low} to {high}.",
            )
        return super().__new__(cls, number)

    @classmethod
    def min_value(cls) -> int:
        """Smallest value representable by this type."""
        if cls.SIGNED:
            return -(1 << (cls.WIDTH * 8 - 1))
        return 0

    @classmethod
    def max_value(cls) -> int:
        """Largest value representable by this type."""
        if cls.SIGNED:
            return (1 << (cls.WIDTH * 8 - 1)) - 1
        return (1 << (cls.WIDTH * 8)) - 1

    def __repr__(self) -> str:
        return f"{type(self).__name__}({int(self)})"

    def __getnewargs__(self) -> tuple[int]:
        return (int(self),)


class Int8(FixedWidthInt):
    __slots__ = ()
    WIDTH = 1
    SIGNED = True


class UInt8(FixedWidthInt):
    __slots__ = ()
    WIDTH = 1
    SIGNED = False


class Int16(FixedWidthInt):
    __slots__ = ()
    WIDTH = 2
    SIGNED = True


class UInt16(FixedWidthInt):
    __slots__ = ()
    WIDTH = 2
    SIGNED = False


class Int32(FixedWidthInt):
    __slots__ = ()
    WIDTH = 4
    SIGNED = True


class UInt32(FixedWidthInt):
    __slots__ = ()
    WIDTH = 4
    SIGNED = False


class Int64(FixedWidthInt):
    __slots__ = ()
    WIDTH = 8
    SIGNED = True


class UInt64(FixedWidthInt):
    __slots__ = ()
    WIDTH = 8
    SIGNED = False


_FIXED_WIDTH_TYPES: dict[tuple[int, bool], type[FixedWidthInt]] = {
    (cls.WIDTH, cls.SIGNED): cls
    for cls in (Int8, UInt8, Int16, UInt16, Int32, UInt32, Int64, UInt64)
}


def fixed_width_type(width: int, *, signed: bool = True) -> type[FixedWidthInt]:
    """Return the concrete integer type for *width* bytes.

    Raises
    ------
    IntegerRangeError
        If no built-in type has the requested width.
    """
    try:
        return _FIXED_WIDTH_TYPES[(width, signed)]
    except KeyError:
        widths = sorted({w for w, _ in _FIXED_WIDTH_TYPES})
        raise IntegerRangeError(
            f"No {width}-byte integer type",
            hint=f"Supported widths: {', '.join(map(str, widths))}.",
        ) from None


# ---------------------------------------------------------------------------
# Homogeneous tuple
# ---------------------------------------------------------------------------

class HomogeneousTuple(tuple):
    """A tuple whose members all share one exact type.

    Built from positional members, so ``HomogeneousTuple(127, 0, 0, 1)``
    rather than ``tuple([127, 0, 0, 1])``.  Mixed member types raise
    :class:`HeterogeneousTupleError` before the instance exists.
    """

    __slots__ = ()

    def __new__(cls, *members: object) -> HomogeneousTuple:
        check_same_type(members)
        return super().__new__(cls, members)

    @property
    def member_type(self) -> type | None:
        """Common type of the members, or ``None`` for the empty tuple."""
        return type(self[0]) if self else None

    def __repr__(self) -> str:
        return f"{type(self).__name__}{tuple.__repr__(self)}"

    def __getnewargs__(self) -> tuple[object, ...]:
        return tuple(self)


def check_same_type(members: tuple[object, ...]) -> None:
    """Raise :class:`HeterogeneousTupleError` unless all members share a type."""
    if not members:
        return
    expected = type(members[0])
    for index, member in enumerate(members[1:], start=1):
        if type(member) is not expected:
            raise HeterogeneousTupleError(
                f"Tuple member {index} is {describe_type(member)}, "
                f"expected {describe_type(members[0])}",
                hint="All members of a tuple must have the same type.",
            )
