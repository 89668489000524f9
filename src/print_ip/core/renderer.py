"""Render values as dotted-octet, IP-address-like text.

Each shape has its own unit renderer:

* **integral** — the value's bit pattern split into big-endian bytes,
  each printed as an unsigned decimal 0–255;
* **sequence** — one unit per element, in order;
* **fixed tuple** — one unit per member, in declared order;
* **text** — the string itself, untouched.

Units are joined with :data:`SEPARATOR` and the line ends with a single
:data:`LINE_TERMINATOR`.  The whole value is validated before anything
is formatted, and the finished line reaches the sink in one ``write``.
"""

from __future__ import annotations

import logging
import sys
from collections import UserString
from collections.abc import Callable, Sequence
from typing import Any

from print_ip.core.protocols import OutputSink
from print_ip.core.shapes import Shape, classify, integer_width, validate
from print_ip.exceptions import describe_type

logger = logging.getLogger(__name__)

SEPARATOR: str = "."
"""Placed between successive units, never after the last one."""

LINE_TERMINATOR: str = "\n"
"""Appended exactly once to every rendered value."""


# ---------------------------------------------------------------------------
# Unit renderers, one per shape
# ---------------------------------------------------------------------------

def integral_units(value: int) -> list[str]:
    """Split *value* into its bytes, most significant first.

    Negative values keep their two's-complement pattern, so an all-ones
    byte renders as ``255``.
    """
    number = int(value)
    return [
        str((number >> (index * 8)) & 0xFF)
        for index in range(integer_width(value) - 1, -1, -1)
    ]


def sequence_units(elements: Sequence[Any]) -> list[str]:
    """One unit per element, in iteration order."""
    return [_element_unit(element) for element in elements]


def tuple_units(members: tuple[Any, ...]) -> list[str]:
    """One unit per member, counting the remaining members down to zero."""
    count = len(members)
    result: list[str] = []
    for remaining in range(count, 0, -1):
        result.append(_element_unit(members[count - remaining]))
    return result


def text_units(text: str | UserString) -> list[str]:
    """The text itself as one unit, ignoring any overridden ``__str__``."""
    if isinstance(text, UserString):
        text = text.data
    return [str.__str__(text)]


_UNIT_RENDERERS: dict[Shape, Callable[[Any], list[str]]] = {
    Shape.TEXT: text_units,
    Shape.FIXED_TUPLE: tuple_units,
    Shape.SEQUENCE: sequence_units,
    Shape.INTEGRAL: integral_units,
}


def _element_unit(element: object) -> str:
    """Render a nested element as a single unit.

    Integers nested in a container print as their decimal value; only a
    top-level integer is split into bytes.
    """
    shape = classify(element)
    if shape is Shape.INTEGRAL:
        return str(int(element))  # type: ignore[call-overload]
    return SEPARATOR.join(_UNIT_RENDERERS[shape](element))


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def units(value: object) -> list[str]:
    """Return the rendered units of *value* without separators.

    Raises
    ------
    UnsupportedTypeError
        If *value* or a nested element cannot be rendered.
    HeterogeneousTupleError
        If a tuple mixes member types.
    HeterogeneousSequenceError
        If a sequence mixes element types.
    """
    shape = validate(value)
    logger.debug("Rendering %s as %s", describe_type(value), shape.value)
    return _UNIT_RENDERERS[shape](value)


def format_ip(value: object) -> str:
    """Return the full rendered line for *value*, terminator included."""
    return SEPARATOR.join(units(value)) + LINE_TERMINATOR


def render(value: object, sink: OutputSink | None = None) -> None:
    """Write the rendered line for *value* to *sink* (default: stdout).

    Nothing is written when *value* fails validation.
    """
    line = format_ip(value)
    target: OutputSink = sink if sink is not None else sys.stdout
    target.write(line)
