import pytest

from credvault.crypto import KeyDeriver
from credvault.storage import SecretEntry, SecretCollection


@pytest.fixture
def fast_deriver():
    """Argon2id with minimal cost so vault round-trips stay quick."""
    return KeyDeriver(time_cost=1, memory_cost=8, parallelism=1)


@pytest.fixture
def vault_path(tmp_path):
    return str(tmp_path / "credentials.encrypted")


@pytest.fixture
def sample_collection():
    return SecretCollection(entries=[
        SecretEntry(service="github.com", username="octocat", password="hunter2"),
        SecretEntry(service="mail", username="me@example.org", password="p@ss w0rd!"),
        SecretEntry(service="github.com", username="work", password="ünïcødé-🔑"),
    ])


def flip_bit(path: str, offset: int, bit: int = 0) -> None:
    with open(path, 'rb') as f:
        data = bytearray(f.read())
    data[offset] ^= 1 << bit
    with open(path, 'wb') as f:
        f.write(bytes(data))


@pytest.fixture
def flip():
    return flip_bit
