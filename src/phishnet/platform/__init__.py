"""Infrastructure adapters: HTTP transport, throttling and logging."""
