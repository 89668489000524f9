"""print-ip — render values as dotted-octet, IP-address-like strings.

Integers are split into big-endian bytes, sequences and tuples into their
elements, and text is passed through verbatim.
"""

from print_ip.core.models import (
    FixedWidthInt,
    HomogeneousTuple,
    Int8,
    Int16,
    Int32,
    Int64,
    UInt8,
    UInt16,
    UInt32,
    UInt64,
)
from print_ip.core.renderer import format_ip, render, units
from print_ip.core.shapes import Shape, classify, validate
from print_ip.version import __version__

__all__: list[str] = [
    "FixedWidthInt",
    "HomogeneousTuple",
    "Int16",
    "Int32",
    "Int64",
    "Int8",
    "Shape",
    "UInt16",
    "UInt32",
    "UInt64",
    "UInt8",
    "__version__",
    "classify",
    "format_ip",
    "render",
    "units",
    "validate",
]
