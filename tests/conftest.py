"""Shared test fixtures."""

import pytest

from roster import MockTextSource, Pbkdf2Verifier, UserStore

USERS_CSV = """email,password,role,firstName,lastName,position,team,joinDate,status
alice@club.com,AlicePass1,admin,Alice,Durand,Présidente,A,2024-01-15,active
bob@club.com,BobPass1,coach,Bob,Bernard,"Entraîneur, avants",A,2024-02-01,active
carl@club.com,CarlPass1,player,Carl,Petit,Pilier,B,2024-03-10,active
dina@club.com,DinaPass1,player,Dina,Moreau,Ailière,B,2024-03-12,inactive
"""


@pytest.fixture
def verifier():
    """A fast verifier; production iteration counts make tests slow."""
    return Pbkdf2Verifier(iterations=1)


@pytest.fixture
def users_csv():
    return USERS_CSV


@pytest.fixture
def loaded_store(verifier, users_csv):
    """A UserStore loaded from the sample CSV."""
    store = UserStore(MockTextSource(users_csv), verifier)
    store.load()
    return store


@pytest.fixture
def fallback_store(verifier):
    """A UserStore whose source always fails, so it holds the demo users."""
    store = UserStore(MockTextSource(None), verifier)
    store.load()
    return store
