from typing import Dict, Iterator, List, Optional

from .models import UTXO, TransactionOutput


class UTXOPool:
    """
    In-memory set of unspent transaction outputs, keyed by UTXO.

    Passing another pool to the constructor makes an independent copy.
    """

    def __init__(self, other: Optional["UTXOPool"] = None):
        self._outputs: Dict[UTXO, TransactionOutput] = {}
        if other is not None:
            self._outputs = dict(other._outputs)

    def add_utxo(self, utxo: UTXO, output: TransactionOutput) -> None:
        self._outputs[utxo] = output

    def remove_utxo(self, utxo: UTXO) -> None:
        self._outputs.pop(utxo, None)

    def get_tx_output(self, utxo: UTXO) -> Optional[TransactionOutput]:
        return self._outputs.get(utxo)

    def contains(self, utxo: UTXO) -> bool:
        return utxo in self._outputs

    def get_all_utxo(self) -> List[UTXO]:
        return list(self._outputs)

    def utxos_for(self, address: str) -> Dict[UTXO, TransactionOutput]:
        return {utxo: output for utxo, output in self._outputs.items() if output.address == address}

    def balance_of(self, address: str) -> float:
        return sum(output.value for output in self.utxos_for(address).values())

    def __contains__(self, utxo: object) -> bool:
        return utxo in self._outputs

    def __iter__(self) -> Iterator[UTXO]:
        return iter(self.get_all_utxo())

    def __len__(self) -> int:
        return len(self._outputs)
