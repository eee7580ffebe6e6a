"""Webhook URL configuration."""

from django.urls import path

from teamintake.webhooks.views import StripeWebhookView

urlpatterns = [
    path("webhooks/stripe/", StripeWebhookView.as_view(), name="stripe_webhook"),
]
