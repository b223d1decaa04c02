"""OAuth application services."""

from apps.social_auth.application.oauth.services.oauth_orchestrator import OAuthOrchestrator

__all__ = ["OAuthOrchestrator"]
