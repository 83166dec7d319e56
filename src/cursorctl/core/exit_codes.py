from __future__ import annotations

# Every failure exits with status 1; the names classify the failure for callers
# and for JSON error payloads.
OK = 0
ERR_USAGE = 1
ERR_CONFIG = 1
ERR_VALIDATION = 1
ERR_ARTIFACT = 1
ERR_DEPLOY = 1
ERR_INTERNAL = 1
