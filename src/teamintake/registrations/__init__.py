"""Registration and lead capture endpoints."""
