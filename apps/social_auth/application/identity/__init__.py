"""Identity feature module.

OAuth 로그인/연결 시 로컬 계정 식별, 생성, 연결 기능을 제공합니다.
"""
