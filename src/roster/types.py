"""Shared types and field names for the roster package."""

Record = dict[str, str]

SECRET_FIELD = "password"
EMAIL_FIELD = "email"
ROLE_FIELD = "role"
STATUS_FIELD = "status"
TEAM_FIELD = "team"
JOIN_DATE_FIELD = "joinDate"

ACTIVE_STATUS = "active"
