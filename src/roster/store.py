"""In-memory user record store: parsing, lookup, authentication and statistics."""

import logging
from collections import Counter
from datetime import datetime, timedelta, timezone
from typing import Any, NamedTuple

from roster.credentials import CredentialVerifier, Pbkdf2Verifier
from roster.fallback import fallback_password, fallback_users
from roster.source import DEFAULT_LOCATION, TextSource
from roster.tokenizer import split_header, tokenize
from roster.types import (
    ACTIVE_STATUS,
    EMAIL_FIELD,
    JOIN_DATE_FIELD,
    ROLE_FIELD,
    SECRET_FIELD,
    STATUS_FIELD,
    TEAM_FIELD,
    Record,
)
from roster.validation import record_issues

logger = logging.getLogger(__name__)

PROVENANCE_SOURCE = "source"
PROVENANCE_FALLBACK = "fallback"

RECENT_JOIN_WINDOW = timedelta(days=30)
DEMO_CREDENTIAL_COUNT = 3


def parse_records(text: str) -> list[Record]:
    """Parse delimited text into records keyed by the header's column names.

    Blank lines are ignored wherever they appear. Rows whose field count does
    not match the header are dropped.
    """
    lines = [line for line in text.split("\n") if line.strip()]
    if not lines:
        return []

    headers = split_header(lines[0])
    records: list[Record] = []

    for row_num, line in enumerate(lines[1:], start=2):
        values = tokenize(line)
        if len(values) != len(headers):
            logger.debug(
                "Dropping row %d: expected %d fields, got %d", row_num, len(headers), len(values)
            )
            continue
        records.append({header: value.strip() for header, value in zip(headers, values)})

    return records


def _parse_join_date(value: str) -> datetime | None:
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


class _Entry(NamedTuple):
    record: Record
    token: str | None
    has_secret: bool


class UserStore:
    """Ordered, in-memory list of user records loaded from a TextSource.

    Lifecycle: construct -> load -> query. Queries before the first load
    return empty results (or None) rather than failing; check is_loaded to
    tell "not loaded" from "no match". Raw secrets are hashed on load through
    the CredentialVerifier and never kept.
    """

    def __init__(self, source: TextSource, verifier: CredentialVerifier | None = None):
        self._source = source
        self._verifier = verifier or Pbkdf2Verifier()
        self._entries: list[_Entry] = []
        self.is_loaded = False
        self.provenance: str | None = None

    parse = staticmethod(parse_records)

    @property
    def is_fallback(self) -> bool:
        return self.provenance == PROVENANCE_FALLBACK

    def __len__(self) -> int:
        return len(self._entries)

    def load(self, location: str = DEFAULT_LOCATION) -> list[Record]:
        """Fetch, parse and retain records, replacing any previous ones.

        Any exception raised by the source, whatever its type, switches to the
        built-in demonstration users; it never propagates.
        Returns the retained records without their secrets.
        """
        try:
            text = self._source.fetch_text(location)
        except Exception as e:
            logger.error("Error loading users from %s: %s", location, e)
            logger.warning("Using fallback demo users")
            records = fallback_users()
            provenance = PROVENANCE_FALLBACK
        else:
            records = parse_records(text)
            provenance = PROVENANCE_SOURCE
            logger.info("Loaded %d users from %s", len(records), location)

        entries = [self._make_entry(record) for record in records]
        self._warn_duplicates(entries)

        self._entries = entries
        self.provenance = provenance
        self.is_loaded = True
        return [dict(entry.record) for entry in entries]

    def _make_entry(self, record: Record) -> _Entry:
        public = dict(record)
        secret = public.pop(SECRET_FIELD, None)
        token = self._verifier.hash(secret) if secret is not None else None
        return _Entry(public, token, bool(secret))

    def _warn_duplicates(self, entries: list[_Entry]) -> None:
        counts = Counter(entry.record.get(EMAIL_FIELD, "").lower() for entry in entries)
        for email, count in counts.items():
            if email and count > 1:
                logger.warning(
                    "Email %s appears %d times; lookups use the first match", email, count
                )

    def _active_matches(self, email: str):
        wanted = email.lower()
        for entry in self._entries:
            record = entry.record
            if (
                record.get(EMAIL_FIELD, "").lower() == wanted
                and record.get(STATUS_FIELD) == ACTIVE_STATUS
            ):
                yield entry

    def authenticate(self, email: str, password: str) -> Record | None:
        """Return the first active user matching email and password, or None."""
        if not self.is_loaded:
            logger.warning("Users not loaded yet")
            return None

        for entry in self._active_matches(email):
            if entry.token is not None and self._verifier.verify(password, entry.token):
                return dict(entry.record)
        return None

    def find_by_email(self, email: str) -> Record | None:
        if not self.is_loaded:
            return None
        for entry in self._active_matches(email):
            return dict(entry.record)
        return None

    def list_active(self) -> list[Record]:
        if not self.is_loaded:
            return []
        return [
            dict(entry.record)
            for entry in self._entries
            if entry.record.get(STATUS_FIELD) == ACTIVE_STATUS
        ]

    def list_by_role(self, role: str) -> list[Record]:
        return [record for record in self.list_active() if record.get(ROLE_FIELD) == role]

    def validate(self) -> dict[str, Any]:
        """Check every record against the required schema.

        Issues are returned as data; line numbers count the header as line 1.
        """
        issues: list[str] = []
        for index, entry in enumerate(self._entries):
            issues.extend(record_issues(entry.record, index + 2, entry.has_secret))

        return {
            "valid": not issues,
            "issues": issues,
            "total": len(self._entries),
            "active_count": sum(
                1 for entry in self._entries if entry.record.get(STATUS_FIELD) == ACTIVE_STATUS
            ),
        }

    def statistics(self, now: datetime | None = None) -> dict[str, Any] | None:
        """Counts over the loaded users, or None before the first load.

        Only active users contribute to by_role, by_team and recent_joins.
        recent_joins counts join dates on or after now minus 30 days.
        """
        if not self.is_loaded:
            return None

        now = now or datetime.now(timezone.utc)
        if now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)
        cutoff = now - RECENT_JOIN_WINDOW

        active = [
            entry.record
            for entry in self._entries
            if entry.record.get(STATUS_FIELD) == ACTIVE_STATUS
        ]
        by_role: dict[str, int] = {}
        by_team: dict[str, int] = {}
        recent_joins = 0

        for record in active:
            role = record.get(ROLE_FIELD, "")
            by_role[role] = by_role.get(role, 0) + 1
            team = record.get(TEAM_FIELD)
            if team:
                by_team[team] = by_team.get(team, 0) + 1

            joined = _parse_join_date(record.get(JOIN_DATE_FIELD, ""))
            if joined is not None and joined >= cutoff:
                recent_joins += 1

        return {
            "total": len(self._entries),
            "active": len(active),
            "by_role": by_role,
            "by_team": by_team,
            "recent_joins": recent_joins,
        }

    def demo_credentials(self) -> list[dict[str, str | None]]:
        """Credentials for the first few users, for display on a login screen.

        Passwords are only known for the built-in demonstration users, so they
        are None whenever real data was loaded.
        """
        credentials = []
        for entry in self._entries[:DEMO_CREDENTIAL_COUNT]:
            record = entry.record
            role = record.get(ROLE_FIELD, "")
            email = record.get(EMAIL_FIELD, "")
            credentials.append(
                {
                    "label": role[:1].upper() + role[1:],
                    "email": email,
                    "password": fallback_password(email) if self.is_fallback else None,
                    "display_name": f"{record.get('firstName', '')} {record.get('lastName', '')}",
                }
            )
        return credentials
