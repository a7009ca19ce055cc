"""The embedded ASCII-art resource and its emitter."""

import logging
from dataclasses import dataclass
from importlib import resources
from typing import BinaryIO

from .frame import padding

LF = 0x0A
CR = 0x0D

RESOURCE_DIR = "data"
RESOURCE_NAME = "dio.txt"


@dataclass(frozen=True)
class Resource:
    data: bytes

    @property
    def length(self) -> int:
        return len(self.data)


def load_resource(name: str = RESOURCE_NAME) -> Resource:
    """Read a resource shipped as package data."""
    data = resources.files("diosay").joinpath(RESOURCE_DIR).joinpath(name).read_bytes()
    logging.getLogger(__name__).debug("Loaded resource %s (%d bytes)", name, len(data))
    return Resource(data)


def emit_resource(
    out: BinaryIO,
    data: bytes,
    indent: int,
    newline_filter: str = "lf_only",
) -> int:
    """
    Copy ``data`` to ``out`` byte for byte, indenting every line.

    The indent goes in front of the first byte and of every byte following
    a line feed; a non-positive indent writes nothing. With the ``lf_only``
    filter carriage returns are dropped. Returns the number of bytes written.
    """
    pad = padding(indent).encode("ascii")
    strip_cr = newline_filter == "lf_only"

    buf = bytearray()
    indent_here = True
    for byte in data:
        if indent_here:
            buf += pad
            indent_here = False

        if not (strip_cr and byte == CR):
            buf.append(byte)

        indent_here = byte == LF

    out.write(bytes(buf))
    return len(buf)
