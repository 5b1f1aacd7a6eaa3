"""Pytest configuration and shared fixtures."""

from datetime import date, datetime, timedelta, timezone

import pytest
from rest_framework.test import APIClient

from events.domain import HrAdmin, VendorAdmin
from events.services.booking_service import BookingService
from events.services.catalog_service import CatalogService
from events.services.event_service import EventService
from events.stores.django_store import (
    DjangoCompanyStore,
    DjangoEventItemStore,
    DjangoEventStore,
    DjangoVendorStore,
)

# Services under test run with the clock pinned here.
NOW = datetime(2024, 1, 1, 9, 0, tzinfo=timezone.utc)
DATES = ["2024-01-15", "2024-01-16", "2024-01-17"]
LOCATION = {"postal_code": "123456", "street_name": "Main St"}


def future_dates(start: int = 10) -> list[str]:
    """Three consecutive days relative to the real current date."""
    today = date.today()
    return [(today + timedelta(days=start + i)).isoformat() for i in range(3)]


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def event_store() -> DjangoEventStore:
    return DjangoEventStore()


@pytest.fixture
def item_store() -> DjangoEventItemStore:
    return DjangoEventItemStore()


@pytest.fixture
def vendor_store() -> DjangoVendorStore:
    return DjangoVendorStore()


@pytest.fixture
def company_store() -> DjangoCompanyStore:
    return DjangoCompanyStore()


@pytest.fixture
def event_service(event_store, item_store, company_store) -> EventService:
    return EventService(event_store, item_store, company_store, clock=lambda: NOW)


@pytest.fixture
def catalog_service(item_store, vendor_store) -> CatalogService:
    return CatalogService(item_store, vendor_store)


@pytest.fixture
def booking(event_service, catalog_service) -> BookingService:
    return BookingService(events=event_service, catalog=catalog_service)


@pytest.fixture
def company(db, company_store):
    return company_store.create_company("Acme Corp")


@pytest.fixture
def other_company(db, company_store):
    return company_store.create_company("Globex")


@pytest.fixture
def vendor(db, vendor_store):
    return vendor_store.create_vendor("Zen Studio", "hello@zen.example")


@pytest.fixture
def other_vendor(db, vendor_store):
    return vendor_store.create_vendor("Health Talks Ltd", "info@talks.example")


@pytest.fixture
def event_item(db, item_store, vendor):
    return item_store.create_event_item(vendor.id, "Yoga Session", "Gentle yoga for all levels")


@pytest.fixture
def hr_admin(company) -> HrAdmin:
    return HrAdmin(user_id="hr-1", company_id=company.id)


@pytest.fixture
def other_hr_admin(other_company) -> HrAdmin:
    return HrAdmin(user_id="hr-2", company_id=other_company.id)


@pytest.fixture
def vendor_admin(vendor) -> VendorAdmin:
    return VendorAdmin(user_id="vendor-1", vendor_id=vendor.id)


@pytest.fixture
def other_vendor_admin(other_vendor) -> VendorAdmin:
    return VendorAdmin(user_id="vendor-2", vendor_id=other_vendor.id)


@pytest.fixture
def pending_event(event_service, event_item, company):
    return event_service.create(str(event_item.id), DATES, LOCATION, company.id)
