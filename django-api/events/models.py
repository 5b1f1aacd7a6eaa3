"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

import uuid

from django.core.exceptions import ValidationError
from django.db import models
from django.utils import timezone

from events.domain.value_objects import (
    POSTAL_CODE_MAX_LENGTH,
    PROPOSED_DATE_COUNT,
    STREET_NAME_MAX_LENGTH,
    EventStatus,
)


def validate_proposed_dates(value) -> None:
    if not isinstance(value, list) or len(value) != PROPOSED_DATE_COUNT:
        raise ValidationError(
            f"Must have exactly {PROPOSED_DATE_COUNT} proposed dates",
            code="proposed_dates_count",
        )


class Company(models.Model):
    """Persistence model for client companies (tenants)."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["name"]
        verbose_name_plural = "companies"

    def __str__(self) -> str:
        return self.name


class Vendor(models.Model):
    """Persistence model for wellness vendors."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    contact_email = models.EmailField()
    description = models.TextField(blank=True, null=True)
    contact_phone = models.CharField(max_length=50, blank=True, null=True)
    address = models.CharField(max_length=500, blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["name"]

    def __str__(self) -> str:
        return self.name


class EventItem(models.Model):
    """Persistence model for a vendor's bookable offering."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    vendor = models.ForeignKey(Vendor, on_delete=models.PROTECT, related_name="event_items")
    name = models.CharField(max_length=200)
    description = models.TextField(max_length=1000, blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["vendor"], name="eventitem_vendor_idx"),
        ]

    def __str__(self) -> str:
        return self.name


class Event(models.Model):
    """Persistence model for booking requests."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    company = models.ForeignKey(Company, on_delete=models.PROTECT, related_name="events")
    event_item = models.ForeignKey(EventItem, on_delete=models.PROTECT, related_name="events")
    # Copied from event_item.vendor at creation.
    vendor = models.ForeignKey(Vendor, on_delete=models.PROTECT, related_name="events")
    proposed_dates = models.JSONField(validators=[validate_proposed_dates])
    location_postal_code = models.CharField(max_length=POSTAL_CODE_MAX_LENGTH)
    location_street_name = models.CharField(max_length=STREET_NAME_MAX_LENGTH)
    status = models.CharField(
        max_length=16,
        choices=[(s.value, s.value) for s in EventStatus],
        default=EventStatus.PENDING.value,
    )
    confirmed_date = models.DateTimeField(blank=True, null=True)
    remarks = models.TextField(blank=True, null=True)
    date_created = models.DateTimeField(default=timezone.now)
    last_modified = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ["-date_created", "id"]
        indexes = [
            models.Index(fields=["company", "-date_created"], name="event_company_created_idx"),
            models.Index(fields=["vendor", "-date_created"], name="event_vendor_created_idx"),
            models.Index(fields=["event_item", "status"], name="event_item_status_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.event_item_id} - {self.status}"
