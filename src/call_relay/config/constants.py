"""Constants shared across the relay."""

DEFAULT_RECIPIENT_ROLE = "user"
DEFAULT_BROADCAST_TOPIC = "doctors"
DEFAULT_ROLE_TOPICS = {"doctor": "doctors"}

LEGACY_IDENTITY_PREFIX = "legacy:"
DEFAULT_LOGIN_RATE_LIMIT = "5/5minute"

# Display length for truncated destinations in responses and logs
DESTINATION_PREVIEW_LENGTH = 20

# Upper bound of messages per FCM send_each() call
FCM_MAX_BATCH_SIZE = 500

INCOMING_CALL_TITLE = "Incoming call"
INCOMING_CALL_EVENT = "incoming_call"
