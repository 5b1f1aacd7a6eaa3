"""Tests for EventService, the booking lifecycle.

Run with: pytest tests/test_services.py -v
"""

from datetime import date, timezone
from uuid import uuid4

import pytest
from django.db import DatabaseError

from events.domain import AUTO_REJECT_REMARK, CompanyId, EventStatus, VendorAdmin
from events.domain.errors import (
    CompanyNotFoundError,
    ConflictError,
    EventItemNotFoundError,
    EventNotFoundError,
    ForbiddenError,
    InvalidIdError,
    InvalidStateError,
    TransactionError,
    ValidationError,
)
from tests.conftest import DATES, LOCATION


def day_of(value) -> date:
    return value.astimezone(timezone.utc).date()


@pytest.mark.django_db
class TestCreate:
    """Tests for EventService.create"""

    def test_new_event_is_pending_with_item_vendor(self, event_service, event_item, company, vendor):
        event = event_service.create(str(event_item.id), DATES, LOCATION, company.id)

        assert event.status is EventStatus.PENDING
        assert event.vendor_id == vendor.id
        assert event.company_id == company.id
        assert event.event_item_id == event_item.id
        assert len(event.proposed_dates) == 3
        assert event.confirmed_date is None
        assert event.remarks is None
        assert event.date_created == event.last_modified

    def test_populates_related_names(self, event_service, event_item, company, vendor):
        event = event_service.create(str(event_item.id), DATES, LOCATION, company.id)

        assert event.company_name == "Acme Corp"
        assert event.event_item_name == "Yoga Session"
        assert event.vendor_name == "Zen Studio"

    def test_unknown_event_item_raises_not_found(self, event_service, company):
        with pytest.raises(EventItemNotFoundError):
            event_service.create(str(uuid4()), DATES, LOCATION, company.id)

    def test_unknown_company_raises_not_found(self, event_service, event_store, event_item):
        with pytest.raises(CompanyNotFoundError):
            event_service.create(str(event_item.id), DATES, LOCATION, CompanyId(uuid4()))

        assert event_store.list_events_for_event_item(event_item.id) == []

    def test_malformed_event_item_id_raises_invalid_id(self, event_service, company):
        with pytest.raises(InvalidIdError):
            event_service.create("nope", DATES, LOCATION, company.id)

    def test_duplicate_days_are_rejected(self, event_service, event_item, company):
        with pytest.raises(ValidationError, match="indices 0 and 1"):
            event_service.create(
                str(event_item.id),
                ["2024-01-15", "2024-01-15T12:00:00Z", "2024-01-17"],
                LOCATION,
                company.id,
            )

    def test_past_dates_are_rejected(self, event_service, event_item, company):
        with pytest.raises(ValidationError, match="future"):
            event_service.create(
                str(event_item.id), ["2023-12-01", "2024-01-16", "2024-01-17"], LOCATION, company.id
            )

    def test_two_dates_are_rejected(self, event_service, event_item, company):
        with pytest.raises(ValidationError):
            event_service.create(str(event_item.id), DATES[:2], LOCATION, company.id)

    def test_missing_street_name_is_rejected(self, event_service, event_item, company):
        with pytest.raises(ValidationError):
            event_service.create(
                str(event_item.id), DATES, {"postal_code": "123456"}, company.id
            )

    def test_item_with_approved_event_raises_conflict(
        self, event_service, event_item, company, other_company, pending_event, vendor
    ):
        event_service.approve(str(pending_event.id), "2024-01-16", vendor.id)

        with pytest.raises(ConflictError):
            event_service.create(str(event_item.id), DATES, LOCATION, other_company.id)


@pytest.mark.django_db
class TestApprove:
    """Tests for EventService.approve"""

    def test_approve_sets_status_and_confirmed_date(self, event_service, pending_event, vendor):
        event = event_service.approve(str(pending_event.id), "2024-01-16", vendor.id)

        assert event.status is EventStatus.APPROVED
        assert day_of(event.confirmed_date) == date(2024, 1, 16)
        assert event.remarks is None
        assert event.last_modified >= pending_event.last_modified

    def test_confirmed_date_matches_by_calendar_day(self, event_service, pending_event, vendor):
        event = event_service.approve(str(pending_event.id), "2024-01-17T16:45:00Z", vendor.id)

        assert day_of(event.confirmed_date) == date(2024, 1, 17)

    def test_date_outside_proposals_is_rejected(self, event_service, event_store, pending_event, vendor):
        with pytest.raises(ValidationError, match="one of the proposed dates"):
            event_service.approve(str(pending_event.id), "2024-01-18", vendor.id)

        assert event_store.get_event(pending_event.id).status is EventStatus.PENDING

    def test_unparsable_date_is_rejected(self, event_service, pending_event, vendor):
        with pytest.raises(ValidationError):
            event_service.approve(str(pending_event.id), "someday", vendor.id)

    def test_second_approval_raises_invalid_state(self, event_service, pending_event, vendor):
        event_service.approve(str(pending_event.id), "2024-01-16", vendor.id)

        with pytest.raises(InvalidStateError, match="Only pending events can be approved"):
            event_service.approve(str(pending_event.id), "2024-01-16", vendor.id)

    def test_other_vendor_is_forbidden(self, event_service, pending_event, other_vendor):
        with pytest.raises(ForbiddenError):
            event_service.approve(str(pending_event.id), "2024-01-16", other_vendor.id)

    def test_unknown_event_raises_not_found(self, event_service, vendor):
        with pytest.raises(EventNotFoundError):
            event_service.approve(str(uuid4()), "2024-01-16", vendor.id)

    def test_auto_rejects_other_pending_events_for_item(
        self, event_service, event_store, event_item, company, other_company, vendor
    ):
        first = event_service.create(str(event_item.id), DATES, LOCATION, company.id)
        second = event_service.create(str(event_item.id), DATES, LOCATION, other_company.id)
        third = event_service.create(
            str(event_item.id), ["2024-02-01", "2024-02-02", "2024-02-03"], LOCATION, company.id
        )

        event_service.approve(str(first.id), "2024-01-15", vendor.id)

        statuses = {e.id: e for e in event_store.list_events_for_event_item(event_item.id)}
        assert statuses[first.id].status is EventStatus.APPROVED
        for sibling in (second, third):
            assert statuses[sibling.id].status is EventStatus.REJECTED
            assert statuses[sibling.id].remarks == AUTO_REJECT_REMARK
        assert all(not e.is_pending for e in statuses.values())

    def test_events_for_other_items_are_untouched(
        self, event_service, event_store, item_store, event_item, company, vendor
    ):
        other_item = item_store.create_event_item(vendor.id, "Health Talk", None)
        approved = event_service.create(str(event_item.id), DATES, LOCATION, company.id)
        unrelated = event_service.create(str(other_item.id), DATES, LOCATION, company.id)

        event_service.approve(str(approved.id), "2024-01-15", vendor.id)

        assert event_store.get_event(unrelated.id).status is EventStatus.PENDING

    def test_failed_auto_rejection_rolls_back_approval(
        self, event_service, event_store, event_item, company, other_company, vendor, monkeypatch
    ):
        first = event_service.create(str(event_item.id), DATES, LOCATION, company.id)
        second = event_service.create(str(event_item.id), DATES, LOCATION, other_company.id)

        def fail(*args, **kwargs):
            raise DatabaseError("connection lost")

        monkeypatch.setattr(event_store, "bulk_set_status", fail)

        with pytest.raises(TransactionError):
            event_service.approve(str(first.id), "2024-01-15", vendor.id)

        assert event_store.get_event(first.id).status is EventStatus.PENDING
        assert event_store.get_event(first.id).confirmed_date is None
        assert event_store.get_event(second.id).status is EventStatus.PENDING

    def test_sibling_rejected_meanwhile_keeps_its_remarks(
        self, event_service, event_store, event_item, company, other_company, vendor, monkeypatch
    ):
        first = event_service.create(str(event_item.id), DATES, LOCATION, company.id)
        second = event_service.create(str(event_item.id), DATES, LOCATION, other_company.id)
        list_pending = event_store.list_pending_event_ids_for_item

        def list_then_reject(*args, **kwargs):
            ids = list_pending(*args, **kwargs)
            event_service.reject(str(second.id), "Venue closed", vendor.id)
            return ids

        monkeypatch.setattr(event_store, "list_pending_event_ids_for_item", list_then_reject)

        event_service.approve(str(first.id), "2024-01-15", vendor.id)

        sibling = event_store.get_event(second.id)
        assert sibling.status is EventStatus.REJECTED
        assert sibling.remarks == "Venue closed"

    def test_lost_race_raises_invalid_state(self, event_service, event_store, pending_event, vendor, monkeypatch):
        monkeypatch.setattr(event_store, "transition_status", lambda *args, **kwargs: False)

        with pytest.raises(InvalidStateError):
            event_service.approve(str(pending_event.id), "2024-01-16", vendor.id)


@pytest.mark.django_db
class TestReject:
    """Tests for EventService.reject"""

    def test_reject_stores_trimmed_remarks(self, event_service, pending_event, vendor):
        event = event_service.reject(str(pending_event.id), "  Fully booked that week  ", vendor.id)

        assert event.status is EventStatus.REJECTED
        assert event.remarks == "Fully booked that week"
        assert event.confirmed_date is None

    @pytest.mark.parametrize("remarks", ["", "   ", "\n\t"])
    def test_blank_remarks_are_rejected(self, event_service, event_store, pending_event, vendor, remarks):
        with pytest.raises(ValidationError):
            event_service.reject(str(pending_event.id), remarks, vendor.id)

        assert event_store.get_event(pending_event.id).status is EventStatus.PENDING

    def test_other_vendor_is_forbidden(self, event_service, pending_event, other_vendor):
        with pytest.raises(ForbiddenError):
            event_service.reject(str(pending_event.id), "No", other_vendor.id)

    def test_rejected_event_cannot_be_approved(self, event_service, event_store, pending_event, vendor):
        rejected = event_service.reject(str(pending_event.id), "No capacity", vendor.id)

        with pytest.raises(InvalidStateError):
            event_service.approve(str(pending_event.id), "2024-01-16", vendor.id)

        assert event_store.get_event(pending_event.id) == rejected

    def test_approved_event_cannot_be_rejected(self, event_service, event_store, pending_event, vendor):
        approved = event_service.approve(str(pending_event.id), "2024-01-16", vendor.id)

        with pytest.raises(InvalidStateError, match="Only pending events can be rejected"):
            event_service.reject(str(pending_event.id), "Changed my mind", vendor.id)

        assert event_store.get_event(pending_event.id) == approved


@pytest.mark.django_db
class TestUpdate:
    """Tests for EventService.update"""

    def test_updates_dates_and_location(self, event_service, pending_event):
        event = event_service.update(
            str(pending_event.id),
            proposed_dates=["2024-03-01", "2024-03-02", "2024-03-03"],
            location={"postal_code": "654321", "street_name": "Side St"},
        )

        assert [day_of(d) for d in event.proposed_dates] == [
            date(2024, 3, 1),
            date(2024, 3, 2),
            date(2024, 3, 3),
        ]
        assert event.location.postal_code == "654321"
        assert event.event_item_id == pending_event.event_item_id
        assert event.last_modified >= pending_event.last_modified

    def test_location_only_keeps_dates(self, event_service, pending_event):
        event = event_service.update(
            str(pending_event.id), location={"postal_code": "999", "street_name": "High St"}
        )

        assert event.proposed_dates == pending_event.proposed_dates
        assert event.location.street_name == "High St"

    def test_duplicate_days_name_indices(self, event_service, pending_event):
        with pytest.raises(ValidationError, match="indices 1 and 2"):
            event_service.update(
                str(pending_event.id),
                proposed_dates=["2024-03-01", "2024-03-02", "2024-03-02T08:00:00Z"],
            )

    def test_non_pending_event_cannot_be_edited(self, event_service, event_store, pending_event, vendor):
        approved = event_service.approve(str(pending_event.id), "2024-01-16", vendor.id)

        with pytest.raises(InvalidStateError, match="status Approved"):
            event_service.update(
                str(pending_event.id), location={"postal_code": "1", "street_name": "X"}
            )

        assert event_store.get_event(pending_event.id) == approved

    def test_no_changes_leave_event_untouched(self, event_service, event_store, pending_event):
        event = event_service.update(str(pending_event.id))

        assert event == pending_event
        assert event_store.get_event(pending_event.id).last_modified == pending_event.last_modified

    def test_overlong_postal_code_is_rejected(self, event_service, event_store, pending_event):
        with pytest.raises(ValidationError, match="postal code"):
            event_service.update(
                str(pending_event.id), location={"postal_code": "1" * 21, "street_name": "Main St"}
            )

        assert event_store.get_event(pending_event.id).location == pending_event.location

    def test_unknown_event_raises_not_found(self, event_service):
        with pytest.raises(EventNotFoundError):
            event_service.update(str(uuid4()), location=LOCATION)


@pytest.mark.django_db
class TestReads:
    """Tests for lookups and listing."""

    def test_get_invalid_id_raises_error(self, event_service):
        with pytest.raises(InvalidIdError):
            event_service.get("not-a-uuid")

    def test_get_not_found_raises_error(self, event_service):
        with pytest.raises(EventNotFoundError):
            event_service.get(str(uuid4()))

    def test_find_one_authorized_allows_owner(self, event_service, pending_event, hr_admin):
        assert event_service.find_one_authorized(str(pending_event.id), hr_admin) == pending_event

    def test_find_one_authorized_forbids_other_company(self, event_service, pending_event, other_hr_admin):
        with pytest.raises(ForbiddenError):
            event_service.find_one_authorized(str(pending_event.id), other_hr_admin)

    def test_find_one_authorized_allows_vendor(self, event_service, pending_event, vendor):
        identity = VendorAdmin(user_id="v", vendor_id=vendor.id)
        assert event_service.find_one_authorized(str(pending_event.id), identity).id == pending_event.id

    def test_find_by_company_is_scoped(self, event_service, event_item, company, other_company):
        own = event_service.create(str(event_item.id), DATES, LOCATION, company.id)
        event_service.create(str(event_item.id), DATES, LOCATION, other_company.id)

        events = event_service.find_by_company(company.id)

        assert [e.id for e in events] == [own.id]
        assert all(e.company_id == company.id for e in events)
