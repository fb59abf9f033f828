"""Infrastructure adapters: upstream API client and event handlers."""
