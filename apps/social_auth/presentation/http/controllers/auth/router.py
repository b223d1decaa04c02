"""Auth Router.

인증 관련 엔드포인트를 통합합니다.
"""

from fastapi import APIRouter

from apps.social_auth.presentation.http.controllers.auth.authorize import (
    router as authorize_router,
)
from apps.social_auth.presentation.http.controllers.auth.callback import (
    router as callback_router,
)
from apps.social_auth.presentation.http.controllers.auth.providers import (
    router as providers_router,
)

router = APIRouter()

router.include_router(providers_router)
router.include_router(authorize_router)
router.include_router(callback_router)
