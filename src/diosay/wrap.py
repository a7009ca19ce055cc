"""Fixed-width line wrapping for the speech bubble body."""

import logging
import string
from typing import List

from .config import INDENT_LENGTH, MAX_LENGTH, MIN_LENGTH

# Same set as C isspace(): no unicode spaces.
TRAILING_WHITESPACE = string.whitespace


def trimmed_length(text: str) -> int:
    """Length of ``text`` once trailing whitespace is stripped."""
    return len(text.rstrip(TRAILING_WHITESPACE))


def wrap_chunks(text: str, length: int, max_length: int = MAX_LENGTH) -> List[str]:
    """
    Split the first ``length`` characters of ``text`` into chunks.

    Pure character wrap, no word boundaries. An empty line still gives one
    (empty) chunk; a length that is an exact multiple of ``max_length`` does
    not give an empty trailing chunk.
    """
    if max_length <= 0:
        raise ValueError(f"max_length must be positive: {max_length}")

    if length <= 0:
        return [""]

    return [text[i : min(i + max_length, length)] for i in range(0, length, max_length)]


def wrap_line(
    text: str,
    length: int,
    indent: int = INDENT_LENGTH,
    max_length: int = MAX_LENGTH,
) -> str:
    """Indent each chunk of ``text`` and terminate it with a newline."""
    prefix = " " * max(0, indent)
    return "".join(f"{prefix}{chunk}\n" for chunk in wrap_chunks(text, length, max_length))


class MessageBuffer:
    """Accumulates wrapped lines and the widest trimmed line seen."""

    def __init__(
        self,
        min_length: int = MIN_LENGTH,
        max_length: int = MAX_LENGTH,
        indent: int = INDENT_LENGTH,
    ):
        self.width = min_length
        self.max_length = max_length
        self.indent = indent
        self._parts: List[str] = []

    @property
    def text(self) -> str:
        return "".join(self._parts)

    def __bool__(self) -> bool:
        return any(self._parts)

    def add_line(self, line: str) -> int:
        length = trimmed_length(line)
        self.width = max(self.width, length)
        wrapped = wrap_line(line, length, self.indent, self.max_length)
        self._parts.append(wrapped)
        logging.getLogger(__name__).debug(
            "Wrapped line of %d chars into %d chunk(s); width=%d",
            length,
            wrapped.count("\n"),
            self.width,
        )
        return length

    def reset(self) -> None:
        # Width survives a reset; only the text is discarded.
        self._parts.clear()
