"""Build-time options for the diosay pipeline."""

import sys
from dataclasses import dataclass

PLATFORMS = ("posix", "native-console")
NEWLINE_FILTERS = ("lf_only", "passthrough")

MIN_LENGTH = 40
MAX_LENGTH = 80
INDENT_LENGTH = 4

# The art hangs under the bubble tail, 31 columns left of the right edge.
RESOURCE_INDENT_OFFSET = 31


def default_platform() -> str:
    return "native-console" if sys.platform == "win32" else "posix"


@dataclass
class Options:
    platform: str = default_platform()
    newline_filter: str = "lf_only"

    min_length: int = MIN_LENGTH
    max_length: int = MAX_LENGTH
    indent_length: int = INDENT_LENGTH
    resource_indent_offset: int = RESOURCE_INDENT_OFFSET

    def __post_init__(self):
        if self.platform not in PLATFORMS:
            raise ValueError(f"unknown platform: {self.platform}")
        if self.newline_filter not in NEWLINE_FILTERS:
            raise ValueError(f"unknown newline filter: {self.newline_filter}")
