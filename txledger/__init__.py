from .core.handler import TxHandler, process_epoch
from .core.models import UTXO, Transaction, TransactionInput, TransactionOutput
from .core.pool import UTXOPool
from .core.validator import is_valid_tx

__all__ = [
    "TxHandler",
    "Transaction",
    "TransactionInput",
    "TransactionOutput",
    "UTXO",
    "UTXOPool",
    "is_valid_tx",
    "process_epoch",
]
