"""Social Auth API.

외부 OAuth 프로바이더 기반 로그인 및 계정 연결 서비스입니다.
"""
