"""Business logic: user administration, authentication, seed data."""
