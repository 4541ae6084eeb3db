"""Admin of the ESP integrations app."""

from django.contrib import admin

from espconnect.models import Integration


def mask_api_key(api_key: str) -> str:
    """Hide all but the last characters of a credential."""
    if len(api_key) <= 4:  # noqa: PLR2004
        return "*" * len(api_key)
    return f"{'*' * 8}{api_key[-4:]}"


@admin.register(Integration)
class IntegrationAdmin(admin.ModelAdmin):
    """Integrations are created through the API, the admin only shows them."""

    list_display = ("provider", "is_active", "last_validated", "updated_at")
    list_filter = ("is_active",)
    fields = (
        "provider",
        "masked_api_key",
        "server_prefix",
        "is_active",
        "account_info",
        "last_validated",
        "created_at",
        "updated_at",
    )
    readonly_fields = fields

    @admin.display(description="API key")
    def masked_api_key(self, obj):
        """Return the masked credential."""
        return mask_api_key(obj.api_key)

    def has_add_permission(self, request):
        """Integrations must be validated against their provider to be created."""
        return False
