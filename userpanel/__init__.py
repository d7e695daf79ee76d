"""User administration panel: login, ADMIN/USER roles, and a REST API for managing accounts."""
