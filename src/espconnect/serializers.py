"""Serializers of the ESP integrations API."""

from rest_framework import serializers

from espconnect.models import Integration


class IntegrationInputSerializer(serializers.Serializer):
    """
    Shape of the body submitted to save an integration.

    Fields are optional here: missing values are reported by the save operation
    with its own message. Values are kept as sent, the credential included.
    """

    provider = serializers.CharField(
        required=False, allow_blank=True, allow_null=True, default="", trim_whitespace=False
    )
    apiKey = serializers.CharField(  # noqa: N815
        source="api_key", required=False, allow_blank=True, allow_null=True, default="", trim_whitespace=False
    )


class IntegrationSerializer(serializers.ModelSerializer):
    """Integration as confirmed after a save."""

    isActive = serializers.BooleanField(source="is_active", read_only=True)  # noqa: N815
    accountInfo = serializers.JSONField(source="account_info", read_only=True)  # noqa: N815
    connectedAt = serializers.DateTimeField(source="last_validated", read_only=True)  # noqa: N815

    class Meta:  # noqa: D106
        model = Integration
        fields = ("id", "provider", "isActive", "accountInfo", "connectedAt")
        read_only_fields = ("id", "provider")


class IntegrationStatusSerializer(serializers.ModelSerializer):
    """Integration as reported after a connection check."""

    accountInfo = serializers.JSONField(source="account_info", read_only=True)  # noqa: N815
    lastValidated = serializers.DateTimeField(source="last_validated", read_only=True)  # noqa: N815

    class Meta:  # noqa: D106
        model = Integration
        fields = ("provider", "accountInfo", "lastValidated")
        read_only_fields = ("provider",)
