"""Intake application configuration."""

from django.apps import AppConfig


class TeamIntakeConfig(AppConfig):
    """Declare the intake application, its email templates are loaded from the app directory."""

    name = "teamintake"
    verbose_name = "Team intake"
