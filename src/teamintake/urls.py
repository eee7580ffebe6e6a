"""Intake URL configuration."""

from django.urls import include, path

from teamintake.registrations.urls import urlpatterns as registration_urls
from teamintake.webhooks.urls import urlpatterns as webhook_urls

urlpatterns = [
    path(
        "",
        include(
            [
                *registration_urls,
                *webhook_urls,
            ]
        ),
    ),
]
