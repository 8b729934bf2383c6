"""Application layer - ports, use cases and exceptions."""
