"""Domain layer - credential schemes, principals and descriptor documents."""
