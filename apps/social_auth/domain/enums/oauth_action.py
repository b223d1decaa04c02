"""OAuth Action Enum."""

from enum import Enum


class OAuthAction(str, Enum):
    """핸드셰이크 목적.

    LOGIN: 외부 계정으로 로그인 (필요 시 신규 계정 생성)
    CONNECT: 로그인된 계정에 외부 계정 연결
    """

    LOGIN = "login"
    CONNECT = "connect"
