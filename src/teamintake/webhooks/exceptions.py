"""Webhook exceptions module."""


class WebhookError(Exception):
    """Base exception for all webhook exceptions."""


class WebhookVerificationError(WebhookError):
    """Exception raised when the event signature cannot be verified."""


class MalformedEventError(WebhookError):
    """Exception raised when the event payload cannot be parsed."""
