import pytest
from passlib.context import CryptContext

from tourney_store.core.security import PasslibVerifier
from tourney_store.services.persistence_service import JsonFileStorage, MemoryStorage
from tourney_store.services.seed_service import build_default_state
from tourney_store.store import Store


@pytest.fixture
def verifier():
    # Cheap hashing so fixtures that seed users stay fast
    context = CryptContext(schemes=["pbkdf2_sha256"], pbkdf2_sha256__default_rounds=1000)
    return PasslibVerifier(context)

@pytest.fixture
def default_state(verifier):
    return build_default_state(verifier)

@pytest.fixture
def player_state(default_state):
    """Default state with the seeded player (balance 500) logged in."""
    return default_state.model_copy(update={"current_user": default_state.find_user("user-1")})

@pytest.fixture
def memory_storage():
    return MemoryStorage()

@pytest.fixture
def memory_store(memory_storage, verifier):
    return Store(storage=memory_storage, verifier=verifier, locale="en")

@pytest.fixture
def file_storage(tmp_path):
    return JsonFileStorage(data_dir=str(tmp_path), storage_key="test_snapshot")

@pytest.fixture
def file_store(file_storage, verifier):
    return Store(storage=file_storage, verifier=verifier, locale="en")
