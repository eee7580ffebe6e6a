"""Payment processor webhooks module."""
