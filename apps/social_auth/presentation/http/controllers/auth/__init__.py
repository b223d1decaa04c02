"""Auth Controllers."""
