"""Redis Key Constants."""

STATE_KEY_PREFIX = "oauth:state:"

# 만료 직후에도 Expired로 보고할 수 있도록 키는 TTL보다 조금 더 유지
STATE_EXPIRY_GRACE_SECONDS = 60

MAX_STATE_ISSUE_ATTEMPTS = 5
