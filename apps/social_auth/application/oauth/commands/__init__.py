"""OAuth use cases."""

from apps.social_auth.application.oauth.commands.authorize import OAuthAuthorizeInteractor
from apps.social_auth.application.oauth.commands.callback import OAuthCallbackInteractor

__all__ = ["OAuthAuthorizeInteractor", "OAuthCallbackInteractor"]
