"""An output stream that writes to a console and a file at once."""

from __future__ import annotations

from typing import Any, TextIO

_RED = "\033[1;31m"
_WHITE = "\033[1;37m"
_RESET = "\033[0m"


class DualStream:
    """Write everything to both a console stream and a file stream.

    Colour codes go to the console only, so the file stays plain text.
    """

    def __init__(self, console: TextIO, file: TextIO) -> None:
        self.console = console
        self.file = file

    def write(self, data: Any) -> DualStream:
        """Write ``data`` as text to both streams and return self for chaining."""
        text = str(data)
        self.console.write(text)
        self.file.write(text)
        return self

    def color_red(self) -> None:
        self.console.write(_RED)

    def color_white(self) -> None:
        self.console.write(_WHITE)

    def reset_color(self) -> None:
        self.console.write(_RESET)