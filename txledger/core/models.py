import base64
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from . import crypto

HASH_HEX_PATTERN = r"^[0-9a-f]{64}$"


class UTXO(BaseModel):
    """Identifies one output of a committed transaction."""

    model_config = ConfigDict(frozen=True)

    tx_hash: str = Field(
        ...,
        pattern=HASH_HEX_PATTERN,
        description="Hex SHA-256 hash of the transaction that created the output.",
    )
    index: int = Field(..., ge=0, description="Position of the output in that transaction.")

    def __str__(self) -> str:
        return f"{self.tx_hash}:{self.index}"


class TransactionInput(BaseModel):
    prev_tx_hash: str = Field(..., pattern=HASH_HEX_PATTERN)
    output_index: int = Field(..., ge=0)
    signature: Optional[str] = None

    def utxo(self) -> UTXO:
        return UTXO(tx_hash=self.prev_tx_hash, index=self.output_index)


class TransactionOutput(BaseModel):
    model_config = ConfigDict(frozen=True)

    value: float
    address: str = Field(..., description="Owner's public key, Base64 encoded PEM.")


class Transaction(BaseModel):
    inputs: List[TransactionInput] = Field(default_factory=list)
    outputs: List[TransactionOutput] = Field(default_factory=list)
    locktime: int = 0

    @property
    def hash(self) -> str:
        """Content hash over the full transaction, signatures included."""
        return crypto.sha256_hash(self.model_dump_json().encode())

    def get_raw_data_to_sign(self, index: int) -> bytes:
        """
        Returns the message the signature of input `index` must authenticate.

        Every signature field is left out so inputs can be signed in any
        order; the input position is prepended so a signature made for one
        position does not verify at another.
        """
        if not 0 <= index < len(self.inputs):
            raise IndexError(f"Input index {index} out of range.")
        unsigned = self.model_dump_json(exclude={"inputs": {"__all__": {"signature"}}})
        return f"{index}|{unsigned}".encode()

    def add_signature(self, index: int, signature: bytes) -> None:
        self.get_input(index).signature = base64.b64encode(signature).decode("utf-8")

    def add_input(self, prev_tx_hash: str, output_index: int) -> None:
        self.inputs.append(TransactionInput(prev_tx_hash=prev_tx_hash, output_index=output_index))

    def add_output(self, value: float, address: str) -> None:
        self.outputs.append(TransactionOutput(value=value, address=address))

    def get_input(self, index: int) -> TransactionInput:
        return self.inputs[index]

    def get_output(self, index: int) -> TransactionOutput:
        return self.outputs[index]

    def num_inputs(self) -> int:
        return len(self.inputs)

    def num_outputs(self) -> int:
        return len(self.outputs)

    def input_utxo(self, index: int) -> UTXO:
        return self.inputs[index].utxo()
