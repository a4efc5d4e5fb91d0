"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from decimal import Decimal

DEFAULT_OVERTIME_RATE = Decimal("1.5")

AUTH_SESSION_KEY = "pankti_auth"

ADVANCE_TRANSACTION_TYPES = ("Cash", "Bank Transfer", "UPI", "Other")
