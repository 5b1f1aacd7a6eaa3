"""Django ORM implementation of the stores.

Each method queries the Django ORM and converts rows to domain models.
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import datetime

from django.core.exceptions import ValidationError as ModelValidationError
from django.db import DatabaseError, transaction
from django.db.models import Exists, OuterRef, QuerySet
from django.utils import timezone

from events import models
from events.domain import (
    Company,
    CompanyId,
    Event,
    EventChanges,
    EventId,
    EventItem,
    EventItemId,
    EventStatus,
    Location,
    NewEvent,
    ProposedDates,
    Vendor,
    VendorId,
)
from events.domain.errors import TransactionError, ValidationError
from events.domain.value_objects import parse_date_input
from events.stores.interfaces import CompanyStore, EventItemStore, EventStore, VendorStore

logger = logging.getLogger(__name__)


def _dates_to_json(proposed_dates: ProposedDates) -> list[str]:
    return [value.isoformat() for value in proposed_dates]


def _to_company(row: models.Company) -> Company:
    return Company(id=CompanyId(row.id), name=row.name, created_at=row.created_at)


def _to_vendor(row: models.Vendor) -> Vendor:
    return Vendor(
        id=VendorId(row.id),
        name=row.name,
        contact_email=row.contact_email,
        description=row.description,
        contact_phone=row.contact_phone,
        address=row.address,
        created_at=row.created_at,
    )


def _to_event_item(row: models.EventItem) -> EventItem:
    return EventItem(
        id=EventItemId(row.id),
        vendor_id=VendorId(row.vendor_id),
        name=row.name,
        description=row.description,
        created_at=row.created_at,
        has_approved_event=bool(getattr(row, "has_approved_event", False)),
        vendor_name=row.vendor.name,
    )


def _to_event(row: models.Event) -> Event:
    return Event(
        id=EventId(row.id),
        company_id=CompanyId(row.company_id),
        event_item_id=EventItemId(row.event_item_id),
        vendor_id=VendorId(row.vendor_id),
        proposed_dates=ProposedDates(
            values=tuple(parse_date_input(value) for value in row.proposed_dates)
        ),
        location=Location(
            postal_code=row.location_postal_code,
            street_name=row.location_street_name,
        ),
        status=EventStatus(row.status),
        confirmed_date=row.confirmed_date,
        remarks=row.remarks,
        date_created=row.date_created,
        last_modified=row.last_modified,
        company_name=row.company.name,
        event_item_name=row.event_item.name,
        event_item_description=row.event_item.description,
        vendor_name=row.vendor.name,
    )


class DjangoCompanyStore(CompanyStore):
    """Company store backed by the Django ORM."""

    def create_company(self, name: str) -> Company:
        return _to_company(models.Company.objects.create(name=name))

    def get_company(self, company_id: CompanyId) -> Company | None:
        row = models.Company.objects.filter(pk=company_id.value).first()
        return _to_company(row) if row else None


class DjangoVendorStore(VendorStore):
    """Vendor store backed by the Django ORM."""

    def create_vendor(
        self,
        name: str,
        contact_email: str,
        description: str | None = None,
        contact_phone: str | None = None,
        address: str | None = None,
    ) -> Vendor:
        row = models.Vendor.objects.create(
            name=name,
            contact_email=contact_email,
            description=description,
            contact_phone=contact_phone,
            address=address,
        )
        return _to_vendor(row)

    def get_vendor(self, vendor_id: VendorId) -> Vendor | None:
        row = models.Vendor.objects.filter(pk=vendor_id.value).first()
        return _to_vendor(row) if row else None


class DjangoEventItemStore(EventItemStore):
    """Catalog store backed by the Django ORM."""

    def _queryset(self) -> QuerySet:
        approved = models.Event.objects.filter(
            event_item=OuterRef("pk"), status=EventStatus.APPROVED.value
        )
        return models.EventItem.objects.select_related("vendor").annotate(
            has_approved_event=Exists(approved)
        )

    def list_event_items(self) -> list[EventItem]:
        return [_to_event_item(row) for row in self._queryset()]

    def list_event_items_for_vendor(self, vendor_id: VendorId) -> list[EventItem]:
        rows = self._queryset().filter(vendor_id=vendor_id.value)
        return [_to_event_item(row) for row in rows]

    def get_event_item(self, event_item_id: EventItemId) -> EventItem | None:
        row = self._queryset().filter(pk=event_item_id.value).first()
        return _to_event_item(row) if row else None

    def create_event_item(
        self, vendor_id: VendorId, name: str, description: str | None
    ) -> EventItem:
        row = models.EventItem.objects.create(
            vendor_id=vendor_id.value, name=name, description=description
        )
        return self.get_event_item(EventItemId(row.id))

    def event_item_belongs_to_vendor(
        self, event_item_id: EventItemId, vendor_id: VendorId
    ) -> bool:
        return models.EventItem.objects.filter(
            pk=event_item_id.value, vendor_id=vendor_id.value
        ).exists()


class DjangoEventStore(EventStore):
    """Event store backed by the Django ORM."""

    def _queryset(self) -> QuerySet:
        return models.Event.objects.select_related("company", "event_item", "vendor")

    @contextmanager
    def atomic(self) -> Iterator[None]:
        try:
            with transaction.atomic():
                yield
        except DatabaseError as exc:
            logger.error("Transaction aborted: %s", type(exc).__name__)
            raise TransactionError() from exc

    def lock_event_item(self, event_item_id: EventItemId) -> None:
        # No-op on backends without SELECT ... FOR UPDATE (SQLite).
        list(
            models.EventItem.objects.select_for_update()
            .filter(pk=event_item_id.value)
            .values_list("pk", flat=True)
        )

    def create_event(self, new_event: NewEvent) -> Event:
        now = timezone.now()
        row = models.Event(
            company_id=new_event.company_id.value,
            event_item_id=new_event.event_item_id.value,
            vendor_id=new_event.vendor_id.value,
            proposed_dates=_dates_to_json(new_event.proposed_dates),
            location_postal_code=new_event.location.postal_code,
            location_street_name=new_event.location.street_name,
            status=new_event.status.value,
            date_created=now,
            last_modified=now,
        )
        try:
            row.full_clean()
        except ModelValidationError as exc:
            raise ValidationError("Invalid event: " + "; ".join(exc.messages)) from exc
        row.save(force_insert=True)
        return self.get_event(EventId(row.id))

    def get_event(self, event_id: EventId) -> Event | None:
        row = self._queryset().filter(pk=event_id.value).first()
        return _to_event(row) if row else None

    def list_events_for_company(self, company_id: CompanyId) -> list[Event]:
        rows = self._queryset().filter(company_id=company_id.value)
        return [_to_event(row) for row in rows]

    def list_events_for_vendor(self, vendor_id: VendorId) -> list[Event]:
        rows = self._queryset().filter(vendor_id=vendor_id.value)
        return [_to_event(row) for row in rows]

    def list_events_for_event_item(self, event_item_id: EventItemId) -> list[Event]:
        rows = self._queryset().filter(event_item_id=event_item_id.value)
        return [_to_event(row) for row in rows]

    def update_event(
        self,
        event_id: EventId,
        changes: EventChanges,
        expected_status: EventStatus | None = None,
    ) -> Event | None:
        fields = {"last_modified": timezone.now()}
        if changes.proposed_dates is not None:
            fields["proposed_dates"] = _dates_to_json(changes.proposed_dates)
        if changes.location is not None:
            fields["location_postal_code"] = changes.location.postal_code
            fields["location_street_name"] = changes.location.street_name

        rows = models.Event.objects.filter(pk=event_id.value)
        if expected_status is not None:
            rows = rows.filter(status=expected_status.value)
        if not rows.update(**fields):
            return None
        return self.get_event(event_id)

    def transition_status(
        self,
        event_id: EventId,
        from_status: EventStatus,
        to_status: EventStatus,
        confirmed_date: datetime | None = None,
        remarks: str | None = None,
    ) -> bool:
        updated = models.Event.objects.filter(
            pk=event_id.value, status=from_status.value
        ).update(
            status=to_status.value,
            confirmed_date=confirmed_date,
            remarks=remarks,
            last_modified=timezone.now(),
        )
        return updated == 1

    def list_pending_event_ids_for_item(
        self, event_item_id: EventItemId, exclude: EventId | None = None
    ) -> list[EventId]:
        rows = models.Event.objects.filter(
            event_item_id=event_item_id.value, status=EventStatus.PENDING.value
        )
        if exclude is not None:
            rows = rows.exclude(pk=exclude.value)
        return [EventId(pk) for pk in rows.values_list("pk", flat=True)]

    def count_approved_for_event_item(self, event_item_id: EventItemId) -> int:
        return models.Event.objects.filter(
            event_item_id=event_item_id.value, status=EventStatus.APPROVED.value
        ).count()

    def bulk_set_status(
        self, event_ids: list[EventId], status: EventStatus, remarks: str | None
    ) -> int:
        if not event_ids:
            return 0
        return models.Event.objects.filter(
            pk__in=[event_id.value for event_id in event_ids],
            status=EventStatus.PENDING.value,
        ).update(status=status.value, remarks=remarks, last_modified=timezone.now())
