from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Callable

from .errors import EmptyTitleError, InvalidDueDateError, PastDueDateError

# A clock returns the current instant as an aware datetime.
Clock = Callable[[], datetime]

UNSET_ID = 0

_RFC3339 = re.compile(
    r"(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})[Tt]"
    r"(?P<hour>\d{2}):(?P<minute>\d{2}):(?P<second>\d{2})(?:\.(?P<fraction>\d+))?"
    r"(?P<offset>[Zz]|[+-]\d{2}:\d{2})\Z",
    re.ASCII,
)


def system_clock() -> datetime:
    return datetime.now(timezone.utc)


# PUBLIC_INTERFACE
@dataclass(frozen=True)
class TodoItem:
    """
    A Todo item as held by the store.

    Fields:
    - id: Store-assigned identifier; UNSET_ID (0) until the item is created
    - title: Non-empty title, stored exactly as given
    - due_date: Timezone-aware due datetime

    Instances are immutable, so anything returned by a repository is a snapshot.
    """

    title: str
    due_date: datetime
    id: int = UNSET_ID

    @property
    def is_persisted(self) -> bool:
        return self.id != UNSET_ID


# PUBLIC_INTERFACE
def validate_todo(item: TodoItem, clock: Clock = system_clock) -> None:
    """
    Check an item's title and due date.

    Raises:
        EmptyTitleError: title is the empty string.
        InvalidDueDateError: due_date carries no UTC offset.
        PastDueDateError: due_date is not strictly after clock().
    """
    if item.title == "":
        raise EmptyTitleError()
    if item.due_date.tzinfo is None or item.due_date.utcoffset() is None:
        raise InvalidDueDateError("due_date must include a UTC offset")
    if item.due_date <= clock():
        raise PastDueDateError()


# PUBLIC_INTERFACE
def new_todo(title: str, due_date: datetime, clock: Clock = system_clock) -> TodoItem:
    """Build a validated, not yet persisted TodoItem."""
    item = TodoItem(title=title, due_date=due_date)
    validate_todo(item, clock)
    return item


# PUBLIC_INTERFACE
def parse_due_date(value: str) -> datetime:
    """
    Parse an RFC 3339 timestamp such as '2030-01-31T13:45:00Z' or
    '2030-01-31T13:45:00+09:00'.

    A trailing 'Z' is accepted as UTC. Fractions longer than microseconds are
    truncated. Date-only strings, timestamps without seconds or an offset, and
    padded input are rejected.
    """
    if not isinstance(value, str):
        raise InvalidDueDateError()
    m = _RFC3339.match(value)
    if m is None:
        raise InvalidDueDateError()
    fraction = (m.group("fraction") or "")[:6].ljust(6, "0")
    if m.group("offset") in ("Z", "z"):
        tz = timezone.utc
    else:
        offset = m.group("offset")
        sign, hours, minutes = offset[0], int(offset[1:3]), int(offset[4:6])
        if hours > 23 or minutes > 59:
            raise InvalidDueDateError()
        delta = timedelta(hours=hours, minutes=minutes)
        tz = timezone(-delta if sign == "-" else delta)
    try:
        return datetime(
            int(m.group("year")),
            int(m.group("month")),
            int(m.group("day")),
            int(m.group("hour")),
            int(m.group("minute")),
            int(m.group("second")),
            int(fraction),
            tzinfo=tz,
        )
    except ValueError as e:
        raise InvalidDueDateError() from e
