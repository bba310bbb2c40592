"""Updates and contacts, rendered in document order."""

from dataclasses import dataclass
from datetime import datetime, tzinfo

from weddings.formatters import format_local, join_nonempty
from weddings.models.entries import Contact, Update


@dataclass(frozen=True)
class UpdateView:
    when: str
    text: str


@dataclass(frozen=True)
class ContactView:
    name: str
    detail: str


def _display_when(when: str, tz: tzinfo) -> str:
    try:
        parsed = datetime.fromisoformat(when.strip().replace("Z", "+00:00"))
    except ValueError:
        return when
    return format_local(parsed, tz)


def render_updates(updates: list[Update], tz: tzinfo) -> list[UpdateView]:
    return [UpdateView(when=_display_when(u.when, tz), text=u.text) for u in updates]


def render_contacts(contacts: list[Contact]) -> list[ContactView]:
    views = []
    for c in contacts:
        role = f"({c.role})" if c.role else ""
        detail = join_nonempty([role, c.phone or ""], sep=" · ")
        views.append(ContactView(name=c.name, detail=f" {detail}" if detail else ""))
    return views
