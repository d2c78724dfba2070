"""
Validity checks for a single transaction against a UTXO pool.

Each check is a pure function of ``(pool, tx)``; `is_valid_tx` is their
conjunction. None of them mutates the pool.
"""

from typing import Callable, List, Tuple

from . import crypto
from .models import Transaction
from .pool import UTXOPool


def all_inputs_in_pool(pool: UTXOPool, tx: Transaction) -> bool:
    """Every output claimed by `tx` is currently unspent."""
    return all(pool.contains(tin.utxo()) for tin in tx.inputs)


def all_signatures_valid(pool: UTXOPool, tx: Transaction) -> bool:
    """Each input is signed by the owner of the output it claims."""
    for i, tin in enumerate(tx.inputs):
        output = pool.get_tx_output(tin.utxo())
        if output is None:
            return False
        if not crypto.verify_signature(output.address, tx.get_raw_data_to_sign(i), tin.signature):
            return False
    return True


def no_double_claims(pool: UTXOPool, tx: Transaction) -> bool:
    """No UTXO is claimed more than once by `tx`."""
    claimed = [tin.utxo() for tin in tx.inputs]
    return len(set(claimed)) == len(claimed)


def no_negative_outputs(pool: UTXOPool, tx: Transaction) -> bool:
    return all(tout.value >= 0 for tout in tx.outputs)


def inputs_cover_outputs(pool: UTXOPool, tx: Transaction) -> bool:
    """The claimed outputs hold at least as much value as `tx` pays out."""
    total_input = 0.0
    for tin in tx.inputs:
        output = pool.get_tx_output(tin.utxo())
        if output is None:
            return False
        total_input += output.value
    total_output = sum(tout.value for tout in tx.outputs)
    return total_input >= total_output


CHECKS: Tuple[Callable[[UTXOPool, Transaction], bool], ...] = (
    all_inputs_in_pool,
    no_double_claims,
    no_negative_outputs,
    inputs_cover_outputs,
    all_signatures_valid,
)


def is_valid_tx(pool: UTXOPool, tx: Transaction) -> bool:
    return all(check(pool, tx) for check in CHECKS)


def failed_checks(pool: UTXOPool, tx: Transaction) -> List[str]:
    """Names of every check `tx` fails; empty when the transaction is valid."""
    return [check.__name__ for check in CHECKS if not check(pool, tx)]
