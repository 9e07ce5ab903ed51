from rest_framework import serializers


class SupplierSerializer(serializers.Serializer):
    """Serialize supplier contact and status information."""

    supplier_id = serializers.CharField(read_only=True)
    name = serializers.CharField(max_length=255)
    website = serializers.URLField(required=False, allow_blank=True, allow_null=True)
    email = serializers.EmailField(required=False, allow_blank=True, allow_null=True)
    phone = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=50)
    address = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    notes = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    archived = serializers.BooleanField(read_only=True)
    status = serializers.SerializerMethodField()
    created_at = serializers.DateTimeField(read_only=True, allow_null=True)
    updated_at = serializers.DateTimeField(read_only=True, allow_null=True)

    def get_status(self, obj) -> str:
        return obj.status.value


class SupplierIdsSerializer(serializers.Serializer):
    """Payload naming a batch of suppliers."""

    ids = serializers.ListField(child=serializers.CharField(), allow_empty=True)


class SupplierArchiveSerializer(SupplierIdsSerializer):
    """Payload for bulk archive/restore requests."""

    archived = serializers.BooleanField(default=True)
