import logging
from typing import Iterable, List

from .models import UTXO, Transaction
from .pool import UTXOPool
from .validator import failed_checks, is_valid_tx

logger = logging.getLogger(__name__)


def commit_transaction(pool: UTXOPool, tx: Transaction) -> None:
    """Creates the outputs of `tx` in the pool and spends its inputs."""
    tx_hash = tx.hash
    for i, tout in enumerate(tx.outputs):
        pool.add_utxo(UTXO(tx_hash=tx_hash, index=i), tout)
    for tin in tx.inputs:
        pool.remove_utxo(tin.utxo())


def process_epoch(pool: UTXOPool, possible_txs: Iterable[Transaction]) -> List[Transaction]:
    """
    Validates candidates one at a time in the given order and commits each
    valid one into `pool` before moving to the next, so later candidates see
    earlier commits. Returns the accepted transactions in order.

    When candidates conflict, the first one wins: the same batch in another
    order can yield a different accepted set.
    """
    accepted: List[Transaction] = []
    rejected = 0
    for tx in possible_txs:
        if not is_valid_tx(pool, tx):
            rejected += 1
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug("Rejected tx %s: %s", tx.hash, ", ".join(failed_checks(pool, tx)))
            continue

        accepted.append(tx)
        commit_transaction(pool, tx)
        logger.info("Accepted tx %s (%d inputs, %d outputs)", tx.hash, tx.num_inputs(), tx.num_outputs())

    logger.info("Epoch processed: %d accepted, %d rejected, %d unspent outputs",
                len(accepted), rejected, len(pool))
    return accepted


class TxHandler:
    """
    Public ledger over a private copy of a UTXO pool.

    The pool handed to the constructor is copied, so the caller's pool is
    never mutated by `handle_txs`.
    """

    def __init__(self, utxo_pool: UTXOPool):
        self.pool = UTXOPool(utxo_pool)

    def is_valid_tx(self, tx: Transaction) -> bool:
        return is_valid_tx(self.pool, tx)

    def handle_txs(self, possible_txs: Iterable[Transaction]) -> List[Transaction]:
        return process_epoch(self.pool, possible_txs)
