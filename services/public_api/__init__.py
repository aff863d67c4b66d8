"""Public API layer composing the listing and user services."""
