"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

REQUIRED_EMPLOYEE_FIELDS = ("name", "surname", "email", "idNumber")

# Client pacing (seconds)
SIMULATED_DELAY_SECONDS = 2.0
NOTIFICATION_TTL_SECONDS = 2.0

SESSION_KEY = "isLoggedIn"

MSG_ADDED = "Successfully added"
MSG_ADD_FAILED = "Failed to add employee"
MSG_DELETED = "Successfully deleted"
MSG_DELETE_FAILED = "Failed to delete employee"
MSG_UPDATED = "Successfully updated"
MSG_UPDATE_FAILED = "Failed to update employee"
