"""
URLs para el módulo wompi_sv.

    path("api/wompi/", include("wompi_sv.urls"))
"""
from django.urls import path

from wompi_sv.views import WompiRedirectView, WompiWebhookView


app_name = "wompi_sv"

urlpatterns = [
    path("webhook/", WompiWebhookView.as_view(), name="webhook"),
    path("redirect/", WompiRedirectView.as_view(), name="redirect"),
]
