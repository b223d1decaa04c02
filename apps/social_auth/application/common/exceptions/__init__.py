"""Application Exceptions.

공통 예외만 포함합니다. 도메인별 예외는 각 도메인에서 직접 import하세요:
  - apps.social_auth.application.oauth.exceptions.*
  - apps.social_auth.application.identity.exceptions.*
  - apps.social_auth.application.token.exceptions.*
"""

from apps.social_auth.application.common.exceptions.base import ApplicationError

__all__ = ["ApplicationError"]
