"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from datetime import date, datetime, time, timezone
from enum import Enum
from typing import Self
from uuid import UUID

from django.utils.dateparse import parse_date, parse_datetime

PROPOSED_DATE_COUNT = 3


@dataclass(frozen=True)
class CompanyId:
    """Unique identifier for a Company (tenant)."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(str(value)))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class VendorId:
    """Unique identifier for a Vendor."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(str(value)))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class EventItemId:
    """Unique identifier for an EventItem."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(str(value)))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class EventId:
    """Unique identifier for an Event."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(str(value)))

    def __str__(self) -> str:
        return str(self.value)


class EventStatus(Enum):
    """Lifecycle states of an Event. Approved and Rejected are terminal."""

    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"

    @property
    def is_terminal(self) -> bool:
        return self is not EventStatus.PENDING


def calendar_day(value: datetime) -> date:
    """Return the UTC calendar day of an aware datetime."""
    return value.astimezone(timezone.utc).date()


def parse_date_input(value: str) -> datetime:
    """Parse an ISO date or datetime string into an aware UTC datetime.

    Date-only strings resolve to midnight UTC; naive datetimes are taken as UTC.

    Raises:
        ValueError: If the string is not a recognisable ISO date.
    """
    if not isinstance(value, str) or not value.strip():
        raise ValueError("Date value must be a non-empty string")
    text = value.strip()
    parsed = parse_datetime(text)
    if parsed is None:
        day = parse_date(text)
        if day is None:
            raise ValueError(f"Invalid date: {text}")
        parsed = datetime.combine(day, time.min)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


@dataclass(frozen=True)
class ProposedDates:
    """Exactly three candidate dates, unique by calendar day."""

    values: tuple[datetime, ...]

    def __post_init__(self) -> None:
        if len(self.values) != PROPOSED_DATE_COUNT:
            raise ValueError(
                f"Exactly {PROPOSED_DATE_COUNT} proposed dates are required"
            )
        duplicates = self.duplicate_indices(self.values)
        if duplicates:
            raise ValueError(
                "Proposed dates at indices "
                + " and ".join(str(i) for i in duplicates)
                + " fall on the same calendar day"
            )

    @classmethod
    def from_strings(cls, values: list[str], now: datetime | None = None) -> Self:
        """Parse three ISO strings, optionally requiring each to be after `now`'s day.

        Raises:
            ValueError: On a wrong count, an unparsable entry, a duplicate
                calendar day or a date that is not in the future.
        """
        if not isinstance(values, (list, tuple)) or len(values) != PROPOSED_DATE_COUNT:
            raise ValueError(
                f"Exactly {PROPOSED_DATE_COUNT} proposed dates are required"
            )
        parsed = tuple(parse_date_input(v) for v in values)
        if now is not None:
            today = calendar_day(now)
            past = [i for i, d in enumerate(parsed) if calendar_day(d) <= today]
            if past:
                raise ValueError(
                    "Proposed dates must be in the future (indices "
                    + ", ".join(str(i) for i in past)
                    + ")"
                )
        return cls(values=parsed)

    @staticmethod
    def duplicate_indices(values: tuple[datetime, ...]) -> list[int]:
        """Return the indices of every entry sharing a calendar day with another."""
        days = [calendar_day(v) for v in values]
        return [i for i, d in enumerate(days) if days.count(d) > 1]

    def match(self, confirmed: datetime) -> datetime | None:
        """Return the proposed date on the same calendar day as `confirmed`."""
        day = calendar_day(confirmed)
        for value in self.values:
            if calendar_day(value) == day:
                return value
        return None

    def __iter__(self):
        return iter(self.values)

    def __len__(self) -> int:
        return len(self.values)


POSTAL_CODE_MAX_LENGTH = 20
STREET_NAME_MAX_LENGTH = 255


@dataclass(frozen=True)
class Location:
    """Where the event takes place. Both fields are required."""

    postal_code: str
    street_name: str

    def __post_init__(self) -> None:
        if not isinstance(self.postal_code, str) or not self.postal_code.strip():
            raise ValueError("Location postal code is required")
        if not isinstance(self.street_name, str) or not self.street_name.strip():
            raise ValueError("Location street name is required")
        object.__setattr__(self, "postal_code", self.postal_code.strip())
        object.__setattr__(self, "street_name", self.street_name.strip())
        if len(self.postal_code) > POSTAL_CODE_MAX_LENGTH:
            raise ValueError(
                f"Location postal code must be at most {POSTAL_CODE_MAX_LENGTH} characters"
            )
        if len(self.street_name) > STREET_NAME_MAX_LENGTH:
            raise ValueError(
                f"Location street name must be at most {STREET_NAME_MAX_LENGTH} characters"
            )
