"""Pure view builders: notes and UI state in, view models and markup out.

Nothing here touches Streamlit. Every piece of user-supplied text goes
through ``escape_html`` (or ``format_note_content``) before it is embedded.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum

from notes_app.models import (
    CATEGORIES,
    DEFAULT_CATEGORY,
    TITLE_MAX_LENGTH,
    Category,
    Note,
    Theme,
)
from notes_app.query import (
    ALL_CATEGORIES,
    category_counts,
    filter_notes,
    partition_pinned,
)
from ui.announcer import Announcement
from ui.formatting import (
    category_color,
    escape_html,
    format_datetime,
    format_note_content,
)


class EmptyState(StrEnum):
    NO_NOTES = "no_notes"
    NO_MATCHES = "no_matches"


# ---------------------------------------------------------------------------
# View models
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class FormView:
    """Create/edit form, pre-populated when editing."""

    heading: str
    submit_label: str
    note_id: str | None = None
    title: str = ""
    content: str = ""
    category: Category = DEFAULT_CATEGORY
    categories: tuple[Category, ...] = CATEGORIES
    title_max_length: int = TITLE_MAX_LENGTH

    @property
    def is_edit(self) -> bool:
        return self.note_id is not None


@dataclass(frozen=True)
class FilterButton:
    id: str
    label: str
    count: int
    active: bool = False


@dataclass(frozen=True)
class ListView:
    search_term: str
    filters: list[FilterButton] = field(default_factory=list)
    pinned: list[Note] = field(default_factory=list)
    others: list[Note] = field(default_factory=list)
    empty_state: EmptyState | None = None

    @property
    def has_notes(self) -> bool:
        return self.empty_state is not EmptyState.NO_NOTES

    @property
    def others_title(self) -> str:
        return "Other Notes" if self.pinned else "All Notes"


def build_form_view(note: Note | None = None) -> FormView:
    if note is None:
        return FormView(heading="Create New Note", submit_label="Create Note")
    return FormView(
        heading="Edit Note",
        submit_label="Update Note",
        note_id=note.id,
        title=note.title,
        content=note.content,
        category=note.category,
    )


def build_list_view(
    notes: Sequence[Note],
    search_term: str = "",
    category: str = ALL_CATEGORIES,
) -> ListView:
    """Filter controls, pinned/other groups and empty-state for the list screen."""
    if not notes:
        return ListView(search_term=search_term, empty_state=EmptyState.NO_NOTES)

    active = category.lower()
    filters = [
        FilterButton(c.id, c.label, c.count, active=c.id == active)
        for c in category_counts(notes)
    ]
    matching = filter_notes(notes, search_term, category)
    if not matching:
        return ListView(
            search_term=search_term, filters=filters, empty_state=EmptyState.NO_MATCHES
        )
    pinned, others = partition_pinned(matching)
    return ListView(
        search_term=search_term, filters=filters, pinned=pinned, others=others
    )


# ---------------------------------------------------------------------------
# Markup
# ---------------------------------------------------------------------------


def render_welcome() -> str:
    return """
<div class="welcome-message">
    <h2>Welcome to Notes App</h2>
    <p>Your personal space for all your notes and ideas.</p>
    <div class="welcome-illustration">
        <div class="note-paper"></div>
        <div class="pencil" aria-hidden="true">✏️</div>
    </div>
</div>
"""


def render_note_card(note: Note, now: datetime | None = None) -> str:
    """Markup for one note card. Action buttons are added by the page."""
    pinned = " pinned" if note.is_pinned else ""
    pin_icon = "📌" if note.is_pinned else "📍"
    pin_label = "Pinned note" if note.is_pinned else "Not pinned"
    created = format_datetime(note.created_at, "full")
    updated = format_datetime(note.updated_at, now=now)
    return f"""
<div class="note-card{pinned}" id="note-{escape_html(note.id)}">
    <div class="note-header">
        <h3 class="note-title">{escape_html(note.title)}</h3>
        <span class="pin-indicator" aria-label="{pin_label}">{pin_icon}</span>
    </div>
    <div class="note-content">{format_note_content(note.content)}</div>
    <div class="note-footer">
        <span class="note-date" title="{created}">{updated}</span>
        <span class="note-category" style="background-color: {category_color(note.category)}">{escape_html(note.category)}</span>
    </div>
</div>
"""


_EMPTY_STATES: dict[EmptyState, tuple[str, str, str]] = {
    EmptyState.NO_NOTES: (
        "📝",
        "No Notes Yet",
        "Get started by creating your first note!",
    ),
    EmptyState.NO_MATCHES: (
        "🔍",
        "No Notes Found",
        "Try adjusting your search or filter criteria.",
    ),
}


def render_empty_state(kind: EmptyState) -> str:
    icon, heading, text = _EMPTY_STATES[kind]
    return f"""
<div class="empty-state">
    <div class="empty-state-icon">{icon}</div>
    <h3>{heading}</h3>
    <p>{text}</p>
</div>
"""


def render_live_region(announcement: Announcement | None) -> str:
    """Visually hidden region read out by screen readers."""
    if announcement is None:
        return '<div class="sr-only" role="status" aria-live="polite"></div>'
    return (
        f'<div class="sr-only" role="status" aria-live="{announcement.politeness}">'
        f"{escape_html(announcement.message)}</div>"
    )


_THEME_TOKENS: dict[Theme, dict[str, str]] = {
    Theme.LIGHT: {
        "--bg": "#f7f8fa",
        "--card": "#ffffff",
        "--text": "#1f2933",
        "--muted": "#616e7c",
        "--line": "#d9e2ec",
        "--accent": "#3366ff",
        "--pinned": "#fff8e1",
        "--code-bg": "#eef2f7",
    },
    Theme.DARK: {
        "--bg": "#0f1720",
        "--card": "#17212b",
        "--text": "#e7eff8",
        "--muted": "#9ab0c5",
        "--line": "#29435d",
        "--accent": "#34c8ff",
        "--pinned": "#2a2514",
        "--code-bg": "#0b1522",
    },
}

_BASE_CSS = """
.stApp { background: var(--bg); color: var(--text); }
.note-card {
    background: var(--card); color: var(--text);
    border: 1px solid var(--line); border-radius: 12px;
    padding: 0.9rem 1rem; margin-bottom: 0.4rem;
}
.note-card.pinned { background: var(--pinned); border-color: var(--accent); }
.note-header { display: flex; justify-content: space-between; align-items: baseline; }
.note-title { margin: 0 0 0.4rem 0; font-size: 1.1rem; }
.note-content { white-space: normal; word-wrap: break-word; }
.note-content code { background: var(--code-bg); padding: 0 0.25rem; border-radius: 4px; }
.note-footer {
    display: flex; justify-content: space-between; margin-top: 0.6rem;
    color: var(--muted); font-size: 0.85rem;
}
.note-category { color: #1f2933; padding: 0.1rem 0.5rem; border-radius: 999px; }
.empty-state, .welcome-message { text-align: center; padding: 2rem 1rem; color: var(--text); }
.empty-state-icon, .pencil { font-size: 2.5rem; }
.sr-only {
    position: absolute; width: 1px; height: 1px; padding: 0; margin: -1px;
    overflow: hidden; clip: rect(0, 0, 0, 0); white-space: nowrap; border: 0;
}
"""


def render_theme_css(theme: Theme) -> str:
    tokens = "\n".join(f"    {k}: {v};" for k, v in _THEME_TOKENS[Theme(theme)].items())
    return f'<style data-theme="{Theme(theme).value}">\n:root {{\n{tokens}\n}}\n{_BASE_CSS}</style>'
