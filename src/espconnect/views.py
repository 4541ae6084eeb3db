"""API views of the ESP integrations app."""

from rest_framework.response import Response
from rest_framework.views import APIView

from espconnect import serializers, services


class IntegrationView(APIView):
    """Store and validate the API key of an ESP account."""

    authentication_classes = []
    permission_classes = []

    def post(self, request):
        """Validate the submitted credential and save the integration."""
        serializer = serializers.IntegrationInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        integration = services.save_integration(**serializer.validated_data)
        return Response(
            {
                "success": True,
                "message": f"{integration.provider.capitalize()} integration saved and validated successfully",
                "data": serializers.IntegrationSerializer(integration).data,
            }
        )


class IntegrationVerifyView(APIView):
    """Verify the connection to an ESP account."""

    authentication_classes = []
    permission_classes = []

    def get(self, request):
        """Validate again the stored credential of the requested provider."""
        integration = services.verify_connection(request.query_params.get("provider"))
        return Response(
            {
                "success": True,
                "connected": True,
                "message": "Connection verified successfully",
                "data": serializers.IntegrationStatusSerializer(integration).data,
            }
        )


class IntegrationListsView(APIView):
    """List the audiences, lists or campaigns of an ESP account."""

    authentication_classes = []
    permission_classes = []

    def get(self, request):
        """Return the mailing lists of the requested provider."""
        integration, lists = services.get_lists(request.query_params.get("provider"))
        return Response(
            {
                "success": True,
                "provider": integration.provider,
                "count": len(lists),
                "lists": lists,
            }
        )


class HealthView(APIView):
    """Health check."""

    authentication_classes = []
    permission_classes = []

    def get(self, request):
        """Report the service is up."""
        return Response({"status": "OK", "message": "Server is running"})
