"""URL configuration of the ESP integrations app."""

from django.urls import include, path

from espconnect import views

integration_urlpatterns = [
    path("esp", views.IntegrationView.as_view(), name="esp-integration"),
    path("esp/verify", views.IntegrationVerifyView.as_view(), name="esp-integration-verify"),
    path("esp/lists", views.IntegrationListsView.as_view(), name="esp-integration-lists"),
]

urlpatterns = [
    path("health", views.HealthView.as_view(), name="health"),
    path("api/integrations/", include(integration_urlpatterns)),
]
