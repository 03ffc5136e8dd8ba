# MIT License
# Copyright (c) 2025 Hashborn

"""
Genesis State

The frozen starting point of a MathChain network: runtime code, initial
balances, sudo key and parachain id. Every node must compute it bit-for-bit
identically, so nothing here may depend on time, randomness or dict ordering
of the caller.
"""

import json
from typing import Annotated, Any, Dict, Tuple
from pydantic import BaseModel, ConfigDict, Field
from ..config.params import MAX_BALANCE, MAX_PARA_ID, SUBSTRATE_SS58_FORMAT
from ..crypto.addresses import ACCOUNT_ID_LEN, ss58_address, account_id_from_ss58
from ..crypto.hash import blake2_256_hex

AccountId = Annotated[bytes, Field(min_length=ACCOUNT_ID_LEN, max_length=ACCOUNT_ID_LEN)]
Balance = Annotated[int, Field(ge=0, le=MAX_BALANCE)]


class GenesisState(BaseModel):
    """
    Initial ledger state.

    `balances` keeps the exact order the assembler received, duplicates
    included; the runtime sees the same sequence on every node.
    """
    model_config = ConfigDict(frozen=True)

    code: bytes = Field(..., min_length=1, description="Compiled runtime wasm")
    balances: Tuple[Tuple[AccountId, Balance], ...] = Field(..., description="Ordered (account, balance) pairs")
    sudo_key: AccountId = Field(..., description="Holder of privileged authority")
    parachain_id: int = Field(..., gt=0, le=MAX_PARA_ID, description="Id within the relay chain")

    def balance_map(self) -> Dict[bytes, int]:
        """Account -> balance. On duplicate accounts the last entry wins."""
        result: Dict[bytes, int] = {}
        for account, amount in self.balances:
            result[account] = amount
        return result

    def total_issuance(self) -> int:
        return sum(self.balance_map().values())

    def to_runtime_json(self, ss58_format: int = SUBSTRATE_SS58_FORMAT) -> Dict[str, Any]:
        """Substrate 'runtime' genesis section."""
        return {
            "frameSystem": {
                "code": "0x" + self.code.hex(),
                "changesTrieConfig": None,
            },
            "palletBalances": {
                "balances": [[ss58_address(acc, ss58_format), amount] for acc, amount in self.balances],
            },
            "palletSudo": {
                "key": ss58_address(self.sudo_key, ss58_format),
            },
            "parachainInfo": {
                "parachainId": self.parachain_id,
            },
        }

    @classmethod
    def from_runtime_json(cls, doc: Dict[str, Any]) -> "GenesisState":
        code_hex = doc["frameSystem"]["code"]
        if code_hex.startswith("0x"):
            code_hex = code_hex[2:]

        balances = []
        for addr, amount in doc["palletBalances"]["balances"]:
            # Floats or strings would not round-trip to the serialized value
            if not isinstance(amount, int) or isinstance(amount, bool):
                raise ValueError(f"Balance of {addr} must be an integer, got {amount!r}")
            balances.append((account_id_from_ss58(addr), amount))

        return cls(
            code=bytes.fromhex(code_hex),
            balances=tuple(balances),
            sudo_key=account_id_from_ss58(doc["palletSudo"]["key"]),
            parachain_id=doc["parachainInfo"]["parachainId"],
        )

    def canonical_json(self) -> str:
        return json.dumps(self.to_runtime_json(), sort_keys=True, separators=(',', ':'))

    def state_hash(self) -> str:
        """BLAKE2b-256 fingerprint of the canonical genesis document."""
        return blake2_256_hex(self.canonical_json().encode())
