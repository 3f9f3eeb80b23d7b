"""Text helpers and constants shared by the prompt sections."""

from __future__ import annotations

from datetime import datetime

WORK_DIR = "/home/project"

# Markup elements the chat client renders in assistant responses.
ALLOWED_HTML_ELEMENTS: tuple[str, ...] = (
    "a",
    "b",
    "blockquote",
    "br",
    "code",
    "dd",
    "del",
    "details",
    "div",
    "dl",
    "dt",
    "em",
    "h1",
    "h2",
    "h3",
    "h4",
    "h5",
    "h6",
    "hr",
    "i",
    "ins",
    "kbd",
    "li",
    "ol",
    "p",
    "pre",
    "q",
    "rp",
    "rt",
    "ruby",
    "s",
    "samp",
    "source",
    "span",
    "strike",
    "strong",
    "sub",
    "summary",
    "sup",
    "table",
    "tbody",
    "td",
    "tfoot",
    "th",
    "thead",
    "tr",
    "ul",
    "var",
    "think",
)


def strip_indents(value: str) -> str:
    """Strip every line, drop leading blank space and one trailing newline."""
    text = "\n".join(line.strip() for line in value.split("\n")).lstrip()
    if text.endswith(("\n", "\r")):
        text = text[:-1]
    return text


def format_local_time(timestamp_ms: int) -> str:
    """Render epoch milliseconds as a local wall-clock time, e.g. ``3:04:05 PM``."""
    moment = datetime.fromtimestamp(timestamp_ms / 1000)
    meridiem = "AM" if moment.hour < 12 else "PM"
    return f"{moment.hour % 12 or 12}:{moment:%M:%S} {meridiem}"


def format_number(value: float | int) -> str:
    """Format a number without a trailing ``.0`` for whole floats."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
