"""User management REST service."""
