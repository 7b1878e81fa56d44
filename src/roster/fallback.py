"""Built-in demonstration users, retained when the source text cannot be fetched."""

from roster.types import Record

FALLBACK_USERS: list[Record] = [
    {
        "email": "admin@rugbyauth.com",
        "password": "AdminPass123",
        "role": "admin",
        "firstName": "Jean",
        "lastName": "Dupont",
        "position": "Administrateur",
        "team": "Management",
        "joinDate": "2024-01-15",
        "status": "active",
    },
    {
        "email": "coach@rugbyauth.com",
        "password": "CoachPass123",
        "role": "coach",
        "firstName": "Pierre",
        "lastName": "Martin",
        "position": "Entraîneur Principal",
        "team": "Staff Technique",
        "joinDate": "2024-02-01",
        "status": "active",
    },
    {
        "email": "player@rugbyauth.com",
        "password": "PlayerPass123",
        "role": "player",
        "firstName": "Marc",
        "lastName": "Leblanc",
        "position": "Pilier",
        "team": "Première Équipe",
        "joinDate": "2024-03-10",
        "status": "active",
    },
]


def fallback_users() -> list[Record]:
    """Return fresh copies of the demonstration users."""
    return [dict(user) for user in FALLBACK_USERS]


def fallback_password(email: str) -> str | None:
    """Look up the public demo password for a fallback email, if any."""
    for user in FALLBACK_USERS:
        if user["email"].lower() == email.lower():
            return user["password"]
    return None
