"""Wrap a message in DIO's speech bubble."""

import logging
import os
import sys
from typing import IO, BinaryIO, Iterator, Optional, Sequence

from .config import Options
from .frame import render_frame
from .resource import emit_resource, load_resource
from .wrap import MessageBuffer

HELP_SEQUENCES = ("--help", "-h", "/?")

HELP_MSG = (
    "Usage: diosay <string>",
    "",
    "Examples:",
    "  diosay what the",
    "  dir | diosay",
    "  type file.txt | diosay",
)

# Bytes that are not valid UTF-8 pass through as lone surrogates and are
# written back out unchanged.
ENCODING = "utf-8"
ERRORS = "surrogateescape"

LOG = logging.getLogger("diosay")


def setup_logging() -> None:
    LOG.setLevel(logging.WARNING)

    # stdout carries the art, so diagnostics only ever go to stderr
    sh = logging.StreamHandler(sys.stderr)
    sh.setLevel(logging.WARNING)
    sh.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))

    LOG.handlers[:] = [sh]
    LOG.propagate = False


def configure_utf8_stderr() -> None:
    """Ask a Windows console for UTF-8 diagnostics on stderr."""
    if sys.platform != "win32":
        return
    if hasattr(sys.stderr, "reconfigure"):
        sys.stderr.reconfigure(encoding="utf-8", errors="replace")


def is_help_sequence(arg: str) -> bool:
    folded = arg.casefold()
    return any(folded == seq for seq in HELP_SEQUENCES)


def stdin_is_piped(stream: IO, platform: str) -> bool:
    """True when ``stream`` is not attached to an interactive terminal."""
    if platform == "posix":
        try:
            return not os.isatty(stream.fileno())
        except (OSError, ValueError):
            LOG.debug("stdin has no file descriptor; falling back to isatty()")

    try:
        return not stream.isatty()
    except (OSError, ValueError, AttributeError):
        LOG.debug("Could not tell whether stdin is a terminal; ignoring it")
        return False


def read_lines(stream: IO) -> Iterator[str]:
    """
    Yield lines without their line terminator; read errors end the stream.

    Binary streams are decoded with ``surrogateescape`` so any byte survives
    the trip to the output.
    """
    try:
        for raw in stream:
            if isinstance(raw, bytes):
                raw = raw.decode(ENCODING, ERRORS)
            if raw.endswith("\n"):
                raw = raw[:-1]
                if raw.endswith("\r"):
                    raw = raw[:-1]
            yield raw
    except (OSError, UnicodeDecodeError) as e:
        LOG.debug("Stopped reading stdin: %s", e)


def collect_message(
    argv: Sequence[str], stdin: IO, options: Optional[Options] = None
) -> MessageBuffer:
    opt = options or Options()
    buf = MessageBuffer(opt.min_length, opt.max_length, opt.indent_length)

    if stdin_is_piped(stdin, opt.platform):
        for line in read_lines(stdin):
            buf.add_line(line)
        LOG.debug("Read piped input; width=%d", buf.width)

    for arg in argv:
        if is_help_sequence(arg):
            LOG.debug("Help requested by %r", arg)
            buf.reset()
            for help_line in HELP_MSG:
                buf.add_line(help_line)
            break

        buf.add_line(arg)

    return buf


def run(
    argv: Sequence[str],
    stdin: IO,
    stdout: BinaryIO,
    options: Optional[Options] = None,
) -> int:
    opt = options or Options()
    buf = collect_message(argv, stdin, opt)

    if buf:
        stdout.write(render_frame(buf.text, buf.width).encode(ENCODING, ERRORS))
    else:
        LOG.debug("No message; emitting the resource only")

    res = load_resource()
    emit_resource(
        stdout,
        res.data,
        buf.width - opt.resource_indent_offset,
        newline_filter=opt.newline_filter,
    )
    stdout.flush()
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    configure_utf8_stderr()
    setup_logging()

    opt = Options()
    LOG.debug("Options: platform=%s newline_filter=%s", opt.platform, opt.newline_filter)
    return run(list(argv), sys.stdin.buffer, sys.stdout.buffer, opt)


if __name__ == "__main__":
    raise SystemExit(main())
