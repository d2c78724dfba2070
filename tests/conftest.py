import pytest

from txledger.core import crypto, wallet
from txledger.core.handler import commit_transaction
from txledger.core.models import UTXO, Transaction
from txledger.core.pool import UTXOPool


@pytest.fixture(scope="session")
def alice_key():
    return crypto.generate_private_key()


@pytest.fixture(scope="session")
def bob_key():
    return crypto.generate_private_key()


@pytest.fixture(scope="session")
def carol_key():
    return crypto.generate_private_key()


@pytest.fixture
def alice(alice_key):
    return crypto.address_of(alice_key)


@pytest.fixture
def bob(bob_key):
    return crypto.address_of(bob_key)


@pytest.fixture
def carol(carol_key):
    return crypto.address_of(carol_key)


@pytest.fixture
def genesis(alice):
    return wallet.create_coinbase_transaction(alice, 10.0)


@pytest.fixture
def genesis_utxo(genesis):
    return UTXO(tx_hash=genesis.hash, index=0)


@pytest.fixture
def pool(genesis):
    """A pool holding a single 10.0 output owned by alice."""
    pool = UTXOPool()
    commit_transaction(pool, genesis)
    return pool


@pytest.fixture
def spend():
    """Builds a transaction claiming `utxos` and signs every input with `private_key`."""
    def _spend(private_key, utxos, outputs, locktime=0):
        tx = Transaction(locktime=locktime)
        for utxo in utxos:
            tx.add_input(utxo.tx_hash, utxo.index)
        for value, address in outputs:
            tx.add_output(value, address)
        return wallet.sign_transaction(tx, private_key)
    return _spend
