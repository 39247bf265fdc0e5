"""Line-oriented text accumulator for one generated file."""

from __future__ import annotations

from io import StringIO


class Emitter:
    def __init__(self) -> None:
        self._buf = StringIO()

    def emit(self, *fragments: str) -> None:
        """Write the fragments back to back, then a newline."""
        for fragment in fragments:
            self._buf.write(fragment)
        self._buf.write("\n")

    def drain(self) -> str:
        """Return everything emitted so far and start over."""
        text = self._buf.getvalue()
        self._buf = StringIO()
        return text
