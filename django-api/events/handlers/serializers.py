"""Serializers for request validation and for rendering domain models.

Request bodies use camelCase; validated data comes out in the snake_case
keyword arguments the services take.
"""

from rest_framework import serializers


class LocationSerializer(serializers.Serializer):
    """Serializer for the Location value object."""

    postalCode = serializers.CharField(source="postal_code", max_length=20)
    streetName = serializers.CharField(source="street_name", max_length=255)


class CreateEventSerializer(serializers.Serializer):
    eventItemId = serializers.CharField(source="event_item_id")
    proposedDates = serializers.ListField(
        child=serializers.CharField(),
        min_length=3,
        max_length=3,
        source="proposed_dates",
    )
    location = LocationSerializer()


class UpdateEventSerializer(serializers.Serializer):
    eventItemId = serializers.CharField(required=False)
    proposedDates = serializers.ListField(
        child=serializers.CharField(),
        min_length=3,
        max_length=3,
        source="proposed_dates",
        required=False,
    )
    location = LocationSerializer(required=False)

    def validate_eventItemId(self, value):
        raise serializers.ValidationError("The event item cannot be changed after creation.")


class ApproveEventSerializer(serializers.Serializer):
    confirmedDate = serializers.CharField(source="confirmed_date")


class RejectEventSerializer(serializers.Serializer):
    # Blank remarks are rejected by the service with its own message.
    remarks = serializers.CharField(allow_blank=True, trim_whitespace=False)


class CreateEventItemSerializer(serializers.Serializer):
    name = serializers.CharField(allow_blank=True, trim_whitespace=False)
    description = serializers.CharField(
        required=False, allow_null=True, allow_blank=True, trim_whitespace=False
    )


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model."""

    id = serializers.UUIDField(source="id.value")
    companyId = serializers.UUIDField(source="company_id.value")
    companyName = serializers.CharField(source="company_name", allow_null=True)
    eventItemId = serializers.UUIDField(source="event_item_id.value")
    eventItemName = serializers.CharField(source="event_item_name", allow_null=True)
    eventItemDescription = serializers.CharField(
        source="event_item_description", allow_null=True
    )
    vendorId = serializers.UUIDField(source="vendor_id.value")
    vendorName = serializers.CharField(source="vendor_name", allow_null=True)
    proposedDates = serializers.ListField(
        child=serializers.DateTimeField(), source="proposed_dates.values"
    )
    location = LocationSerializer()
    status = serializers.CharField(source="status.value")
    confirmedDate = serializers.DateTimeField(source="confirmed_date", allow_null=True)
    remarks = serializers.CharField(allow_null=True)
    dateCreated = serializers.DateTimeField(source="date_created")
    lastModified = serializers.DateTimeField(source="last_modified")


class EventItemSerializer(serializers.Serializer):
    """Serializer for EventItem domain model."""

    id = serializers.UUIDField(source="id.value")
    vendorId = serializers.UUIDField(source="vendor_id.value")
    vendorName = serializers.CharField(source="vendor_name", allow_null=True)
    name = serializers.CharField()
    description = serializers.CharField(allow_null=True)
    hasApprovedEvent = serializers.BooleanField(source="has_approved_event")
    createdAt = serializers.DateTimeField(source="created_at")
