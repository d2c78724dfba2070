import math
from typing import Dict

from . import crypto
from .models import UTXO, Transaction, TransactionInput, TransactionOutput
from .pool import UTXOPool


def create_coinbase_transaction(address: str, value: float, locktime: int = 0) -> Transaction:
    """A transaction with no inputs minting `value` to `address`."""
    return Transaction(
        inputs=[],
        outputs=[TransactionOutput(value=value, address=address)],
        locktime=locktime
    )


def select_utxos(pool: UTXOPool, address: str, amount: float) -> Dict[UTXO, TransactionOutput]:
    """Picks outputs owned by `address`, in pool order, until they cover `amount`."""
    utxos_to_spend = {}
    total_input = 0.0
    for utxo, output in pool.utxos_for(address).items():
        utxos_to_spend[utxo] = output
        total_input += output.value
        if total_input >= amount:
            break

    if total_input < amount:
        raise ValueError("Insufficient funds.")
    return utxos_to_spend


def sign_transaction(tx: Transaction, private_key) -> Transaction:
    for i in range(tx.num_inputs()):
        tx.add_signature(i, crypto.sign_message(private_key, tx.get_raw_data_to_sign(i)))
    return tx


def create_signed_transaction(
    private_key,
    recipient_address: str,
    amount: float,
    fee: float,
    pool: UTXOPool
) -> Transaction:
    """
    Builds a transaction paying `amount` to `recipient_address` out of the
    sender's unspent outputs in `pool`, leaving `fee` unclaimed and returning
    the rest to the sender as change.
    """
    sender_address = crypto.address_of(private_key)
    amount_to_send = amount + fee
    utxos_to_spend = select_utxos(pool, sender_address, amount_to_send)
    total_input = sum(output.value for output in utxos_to_spend.values())

    outputs = [TransactionOutput(value=amount, address=recipient_address)]
    change = total_input - amount_to_send
    # float rounding can push amount + change past what the inputs hold
    while change > 0 and amount + change > total_input - fee:
        change = math.nextafter(change, 0)
    if change > 0:
        outputs.append(TransactionOutput(value=change, address=sender_address))

    inputs = [TransactionInput(prev_tx_hash=utxo.tx_hash, output_index=utxo.index) for utxo in utxos_to_spend]

    return sign_transaction(Transaction(inputs=inputs, outputs=outputs), private_key)
