"""Social Auth tests."""
