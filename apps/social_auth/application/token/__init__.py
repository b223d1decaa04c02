"""Credential feature module."""
