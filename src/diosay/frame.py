"""Speech-bubble frame around the wrapped message."""

CAPTION = "You were expecting"
PUNCHLINE = "... BUT IT WAS ME! DIO!!!"


def padding(length: int, fill: str = " ") -> str:
    """``length`` copies of ``fill``; empty for non-positive lengths."""
    return fill * length if length > 0 else ""


def render_frame(content: str, width: int) -> str:
    """
    Draw the bubble sized to ``width`` with ``content`` inside it.

    ``content`` is the already wrapped and indented message. Widths under
    32 give a misaligned bubble, but every fill is clamped so nothing breaks.
    """
    lines = [
        "     " + padding(width, "_"),
        "  .' " + padding(width) + " '.",
        " /          " + CAPTION + padding(width - 25) + "   \\",
        "",
        content,
        " \\      " + padding(width - 32) + PUNCHLINE + "       /",
        "  '. " + padding(width - 4, "_") + "   _ .'",
        " " + padding(width) + "\\ |",
        " " + padding(width + 1) + "\\'",
    ]
    return "\n".join(lines) + "\n"
