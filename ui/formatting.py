"""Text formatting helpers shared by the renderers."""

from __future__ import annotations

import html
import re
from datetime import UTC, datetime

_BOLD = re.compile(r"\*\*(.*?)\*\*")
_ITALIC = re.compile(r"\*(.*?)\*")
_CODE = re.compile(r"`([^`]+)`")

# Pastel backgrounds for category pills
_CATEGORY_COLORS: tuple[str, ...] = (
    "#e3f2fd",
    "#e8f5e9",
    "#fff3e0",
    "#f3e5f5",
    "#e0f7fa",
    "#fce4ec",
    "#f1f8e9",
    "#fffde7",
)


def escape_html(text: str | None) -> str:
    """Escape ``& < > " '`` so user text can be embedded in markup."""
    if not text:
        return ""
    return html.escape(text, quote=True)


def format_note_content(content: str | None) -> str:
    """Escape note content, then apply the inline markup tokens."""
    if not content:
        return ""
    formatted = escape_html(content)
    formatted = _BOLD.sub(r"<strong>\1</strong>", formatted)
    formatted = _ITALIC.sub(r"<em>\1</em>", formatted)
    formatted = _CODE.sub(r"<code>\1</code>", formatted)
    return formatted.replace("\n", "<br>")


def format_datetime(
    value: datetime | None,
    style: str = "relative",
    now: datetime | None = None,
) -> str:
    """Render a timestamp as ``relative``, ``short`` or ``full`` text.

    Relative formatting only covers the last week; older timestamps use the
    full format.
    """
    if value is None:
        return "N/A"

    if style == "relative":
        now = now or datetime.now(UTC)
        seconds = int((now - value).total_seconds())
        if seconds < 60:
            return "Just now"
        if seconds < 3600:
            return f"{seconds // 60}m ago"
        if seconds < 86400:
            return f"{seconds // 3600}h ago"
        if seconds < 604800:
            return f"{seconds // 86400}d ago"

    if style == "short":
        return f"{value:%b} {value.day}, {value.year}"

    return f"{value:%B} {value.day}, {value.year}, {value:%I:%M %p}"


def _to_int32(n: int) -> int:
    n &= 0xFFFFFFFF
    return n - 0x100000000 if n & 0x80000000 else n


def category_color(category: str) -> str:
    """Stable background colour for a category name."""
    h = 0
    for ch in category:
        h = ord(ch) + (_to_int32(_to_int32(h) << 5) - h)
    return _CATEGORY_COLORS[abs(h) % len(_CATEGORY_COLORS)]
