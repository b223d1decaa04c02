"""Background Scheduling."""

from apps.social_auth.infrastructure.scheduling.state_sweeper import StateSweeper

__all__ = ["StateSweeper"]
