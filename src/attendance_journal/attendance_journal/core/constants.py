"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

TOKEN_TTL_SECONDS = 3600
JWT_ALGORITHM = "HS256"
MIN_PASSWORD_LENGTH = 6
DEFAULT_POOL_NAME = "attendance_journal"
INTERNAL_ERROR_MESSAGE = "Internal server error"
