"""Email Service Provider integrations for Django."""
