"""Protocols (interfaces) consumed by the core layer.

The renderer turns a value into text; where that text goes is decided
by whatever object the caller passes as a sink.
"""

from __future__ import annotations

from typing import Protocol


class OutputSink(Protocol):
    """Contract for rendering destinations.

    Any object with a text ``write`` method satisfies this protocol
    structurally — ``sys.stdout``, :class:`io.StringIO`, or a file
    opened in text mode.
    """

    def write(self, text: str, /) -> object:
        """Write *text* to the destination.  The return value is ignored."""
        ...  # pragma: no cover
