"""Internal constants shared across the library."""

BASE_URL = "http://example.com:8000"
DEFAULT_NAMESPACE = "watson_instance"

#: Remote status fields use the literal string ``"1"`` for "true".
SENTINEL_TRUE = "1"

DEFAULT_POLL_INTERVAL: float = 1.0
DEFAULT_REQUEST_TIMEOUT: float = 10.0

# ------------------------------------------------------------------
# Request paths
# ------------------------------------------------------------------

STATUS_PATH = "/session_status"
BEGIN_TRANSCRIPT_PATH = "/begin_transcript"
SESSION_CLOSE_PATH = "/session_close"
DISABLE_CAPTIONS_PATH = "/disable_captions"
ENABLE_CAPTIONS_PATH = "/enable_captions"

# ------------------------------------------------------------------
# Status keys read by feedbacks and the toggle decision
# ------------------------------------------------------------------

SESSION_STATUS_KEY = "session_status"
OUTPUT_MUTED_KEY = "isOutputMuted"
