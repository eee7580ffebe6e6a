"""Test project URL configuration."""

from django.urls import include, path

urlpatterns = [
    path("api/", include("teamintake.urls")),
]
