"""Protocol constants.

Keep these in one place to avoid stringly-typed message handling.
"""

# Envelope keys
ID = "id"
METHOD = "method"
PARAMS = "params"
RESULT = "result"
ERROR = "error"

# Error object keys
CODE = "code"
MESSAGE = "message"
DATA = "data"

# Target.receivedMessageFromTarget parameters
SESSION_ID = "sessionId"
TARGET_ID = "targetId"

# The one event whose parameters embed a complete envelope.
RECEIVED_MESSAGE_FROM_TARGET = "Target.receivedMessageFromTarget"
