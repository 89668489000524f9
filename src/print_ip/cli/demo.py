"""``print-ip demo`` — render the reference sample set.

One line per sample, written to stdout:

* plain integers, split into their four or eight bytes;
* a signed byte holding ``-1``;
* a deque of integers and a list of strings;
* a four-member tuple;
* a pre-formatted text value with seven groups.
"""

from __future__ import annotations

from collections import deque

from print_ip.cli import exit_codes
from print_ip.core.models import HomogeneousTuple, Int8
from print_ip.core.protocols import OutputSink
from print_ip.core.renderer import render

DEMO_VALUES: tuple[object, ...] = (
    0,
    1,
    255,
    256,
    1234567890,
    1234567890123456,
    Int8(-1),
    deque([0, 1, 2, 3]),
    ["abc", "def", "gij", "klm", "nop", "rst"],
    HomogeneousTuple(127, 0, 0, 1),
    "123.45.67.89.12.34.56",
)


def run_demo(sink: OutputSink | None = None) -> int:
    """Render every demo value to *sink* (default: stdout)."""
    for value in DEMO_VALUES:
        render(value, sink)
    return exit_codes.SUCCESS
