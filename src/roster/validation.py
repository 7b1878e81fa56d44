"""Schema and format checks over parsed user records."""

import re

from roster.types import EMAIL_FIELD, ROLE_FIELD, SECRET_FIELD, STATUS_FIELD, Record

REQUIRED_FIELDS = [EMAIL_FIELD, SECRET_FIELD, ROLE_FIELD, "firstName", "lastName", STATUS_FIELD]
VALID_ROLES = ["admin", "coach", "player", "staff"]
VALID_STATUSES = ["active", "inactive", "suspended"]

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def is_valid_email(email: str) -> bool:
    return bool(EMAIL_RE.match(email))


def record_issues(record: Record, line_number: int, has_secret: bool) -> list[str]:
    """Return human-readable issues for one record.

    The secret never lives on the record itself, so its presence is passed in
    as has_secret.
    """
    issues = []

    for field in REQUIRED_FIELDS:
        if field == SECRET_FIELD:
            present = has_secret
        else:
            present = bool(record.get(field, "").strip())
        if not present:
            issues.append(f"Line {line_number}: missing field '{field}'")

    email = record.get(EMAIL_FIELD)
    if email and not is_valid_email(email):
        issues.append(f"Line {line_number}: invalid email format '{email}'")

    role = record.get(ROLE_FIELD)
    if role and role.lower() not in VALID_ROLES:
        issues.append(f"Line {line_number}: invalid role '{role}'")

    status = record.get(STATUS_FIELD)
    if status and status.lower() not in VALID_STATUSES:
        issues.append(f"Line {line_number}: invalid status '{status}'")

    return issues
