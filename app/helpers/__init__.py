"""Helpers behind the API routes: auth, audit, and organisation-scoped data access."""
