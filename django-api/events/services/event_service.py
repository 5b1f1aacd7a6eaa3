"""Event service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors

The lifecycle is Pending -> Approved | Rejected. Both end states are final.
"""

import logging
from collections.abc import Callable
from datetime import datetime

from django.utils import timezone

from events.domain import (
    AUTO_REJECT_REMARK,
    CompanyId,
    Event,
    EventChanges,
    EventId,
    EventItemId,
    EventStatus,
    Identity,
    Location,
    NewEvent,
    ProposedDates,
    VendorId,
)
from events.domain.errors import (
    CompanyNotFoundError,
    ConflictError,
    EventItemNotFoundError,
    EventNotFoundError,
    ForbiddenError,
    InvalidIdError,
    InvalidStateError,
    ValidationError,
)
from events.domain.value_objects import parse_date_input
from events.services.access import validate_access
from events.stores.interfaces import CompanyStore, EventItemStore, EventStore

logger = logging.getLogger(__name__)


def _parse_event_id(event_id: str) -> EventId:
    try:
        return EventId.from_string(event_id)
    except ValueError:
        raise InvalidIdError("event ID") from None


def _build_location(location: dict) -> Location:
    if not isinstance(location, dict):
        raise ValidationError("Location must include a postal code and a street name")
    try:
        return Location(
            postal_code=location.get("postal_code"),
            street_name=location.get("street_name"),
        )
    except ValueError as exc:
        raise ValidationError(str(exc)) from None


class EventService:
    """Service for the event booking lifecycle."""

    def __init__(
        self,
        event_store: EventStore,
        item_store: EventItemStore,
        company_store: CompanyStore,
        clock: Callable[[], datetime] = timezone.now,
    ) -> None:
        self._store = event_store
        self._items = item_store
        self._companies = company_store
        self._clock = clock

    def _proposed_dates(self, values: list[str]) -> ProposedDates:
        try:
            return ProposedDates.from_strings(values, now=self._clock())
        except ValueError as exc:
            raise ValidationError(str(exc)) from None

    def create(
        self,
        event_item_id: str,
        proposed_dates: list[str],
        location: dict,
        company_id: CompanyId,
    ) -> Event:
        """Request a booking of an event item on one of three dates.

        The vendor is always taken from the event item.

        Raises:
            InvalidIdError: If the event_item_id is not a valid UUID.
            EventItemNotFoundError: If the event item does not exist.
            CompanyNotFoundError: If the requesting company does not exist.
            ValidationError: If the dates or location are invalid.
            ConflictError: If the event item already has an approved event.
        """
        try:
            item_id = EventItemId.from_string(event_item_id)
        except ValueError:
            raise InvalidIdError("event item ID") from None
        item = self._items.get_event_item(item_id)
        if item is None:
            raise EventItemNotFoundError(event_item_id)
        if self._companies.get_company(company_id) is None:
            raise CompanyNotFoundError(str(company_id))

        new_event = NewEvent(
            company_id=company_id,
            event_item_id=item.id,
            vendor_id=item.vendor_id,
            proposed_dates=self._proposed_dates(proposed_dates),
            location=_build_location(location),
        )

        with self._store.atomic():
            self._store.lock_event_item(item.id)
            if self._store.has_approved_event_for_item(item.id):
                raise ConflictError(
                    "Cannot create event: An approved event already exists for this event item"
                )
            event = self._store.create_event(new_event)

        logger.info(
            "Event created: event=%s company=%s item=%s", event.id, company_id, item.id
        )
        return event

    def get(self, event_id: str) -> Event:
        """Return an event by ID.

        Raises:
            InvalidIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
        """
        event = self._store.get_event(_parse_event_id(event_id))
        if event is None:
            raise EventNotFoundError(event_id)
        return event

    def find_one_authorized(self, event_id: str, identity: Identity) -> Event:
        event = self.get(event_id)
        validate_access(event, identity)
        return event

    def find_by_company(self, company_id: CompanyId) -> list[Event]:
        return self._store.list_events_for_company(company_id)

    def find_by_vendor(self, vendor_id: VendorId) -> list[Event]:
        return self._store.list_events_for_vendor(vendor_id)

    def find_by_event_item(self, event_item_id: EventItemId) -> list[Event]:
        return self._store.list_events_for_event_item(event_item_id)

    def _load_for_decision(
        self, event_id: str, vendor_id: VendorId, action: str, past_tense: str
    ) -> Event:
        event = self.get(event_id)
        if event.vendor_id != vendor_id:
            raise ForbiddenError(f"Not authorized to {action} this event")
        if not event.is_pending:
            raise InvalidStateError(f"Only pending events can be {past_tense}")
        return event

    def approve(self, event_id: str, confirmed_date: str, vendor_id: VendorId) -> Event:
        """Confirm one of the proposed dates and reject competing requests.

        The approval and the rejection of every other pending event for the
        same event item commit together or not at all.

        Raises:
            EventNotFoundError: If the event does not exist.
            ForbiddenError: If the event belongs to another vendor.
            InvalidStateError: If the event is no longer pending.
            ValidationError: If confirmed_date is not one of the proposed days.
            TransactionError: If the transaction could not be committed.
        """
        event = self._load_for_decision(event_id, vendor_id, "approve", "approved")

        try:
            confirmed = parse_date_input(confirmed_date)
        except ValueError as exc:
            raise ValidationError(str(exc)) from None
        matched = event.proposed_dates.match(confirmed)
        if matched is None:
            raise ValidationError("Confirmed date must be one of the proposed dates")

        with self._store.atomic():
            self._store.lock_event_item(event.event_item_id)
            if not self._store.transition_status(
                event.id,
                EventStatus.PENDING,
                EventStatus.APPROVED,
                confirmed_date=matched,
            ):
                raise InvalidStateError("Only pending events can be approved")
            siblings = self._store.list_pending_event_ids_for_item(
                event.event_item_id, exclude=event.id
            )
            rejected = self._store.bulk_set_status(
                siblings, EventStatus.REJECTED, AUTO_REJECT_REMARK
            )

        logger.info(
            "Event approved: event=%s item=%s auto_rejected=%d",
            event.id,
            event.event_item_id,
            rejected,
        )
        return self.get(event_id)

    def reject(self, event_id: str, remarks: str, vendor_id: VendorId) -> Event:
        """Decline a pending event with a remark.

        Raises:
            EventNotFoundError: If the event does not exist.
            ForbiddenError: If the event belongs to another vendor.
            InvalidStateError: If the event is no longer pending.
            ValidationError: If remarks are empty after trimming.
        """
        event = self._load_for_decision(event_id, vendor_id, "reject", "rejected")

        remarks = (remarks or "").strip()
        if not remarks:
            raise ValidationError("Remarks are required when rejecting an event")

        if not self._store.transition_status(
            event.id, EventStatus.PENDING, EventStatus.REJECTED, remarks=remarks
        ):
            raise InvalidStateError("Only pending events can be rejected")

        logger.info("Event rejected: event=%s", event.id)
        return self.get(event_id)

    def update(
        self,
        event_id: str,
        proposed_dates: list[str] | None = None,
        location: dict | None = None,
    ) -> Event:
        """Edit the dates and/or location of a pending event.

        Raises:
            EventNotFoundError: If the event does not exist.
            InvalidStateError: If the event is not pending.
            ValidationError: If the new dates or location are invalid.
        """
        event = self.get(event_id)
        if not event.is_pending:
            raise InvalidStateError(
                f"Cannot edit event with status {event.status.value}. "
                "Only pending events can be edited."
            )

        changes = EventChanges(
            proposed_dates=(
                self._proposed_dates(proposed_dates) if proposed_dates is not None else None
            ),
            location=_build_location(location) if location is not None else None,
        )
        if changes.is_empty:
            return event

        updated = self._store.update_event(
            event.id, changes, expected_status=EventStatus.PENDING
        )
        if updated is None:
            current = self.get(event_id)
            raise InvalidStateError(
                f"Cannot edit event with status {current.status.value}. "
                "Only pending events can be edited."
            )

        logger.info("Event updated: event=%s", event.id)
        return updated
