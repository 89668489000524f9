"""Core layer — shape selection, value types, and rendering.

Rules
-----
* No imports from ``cli``.
* The only I/O is the single ``write`` to the caller's sink in
  :func:`~print_ip.core.renderer.render`.
* Errors surface as :class:`~print_ip.exceptions.PrintIpError`
  subclasses, raised before any output.
"""

from print_ip.core.models import FixedWidthInt, HomogeneousTuple, fixed_width_type
from print_ip.core.protocols import OutputSink
from print_ip.core.renderer import LINE_TERMINATOR, SEPARATOR, format_ip, render, units
from print_ip.core.shapes import Shape, classify, integer_width, is_signed, validate

__all__: list[str] = [
    "FixedWidthInt",
    "HomogeneousTuple",
    "LINE_TERMINATOR",
    "OutputSink",
    "SEPARATOR",
    "Shape",
    "classify",
    "fixed_width_type",
    "format_ip",
    "integer_width",
    "is_signed",
    "render",
    "units",
    "validate",
]
