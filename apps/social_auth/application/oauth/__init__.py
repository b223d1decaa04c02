"""OAuth handshake feature module."""
