# MIT License
# Copyright (c) 2025 Hashborn

"""
Genesis State Assembler

Turns a root account, the endowed accounts and the parachain id into a
GenesisState. The root only gets funds if the caller lists it among the
endowed accounts.
"""

import time
import logging
from typing import Iterable, Optional, Sequence, Tuple
from protocol.types.common import MissingRuntimeError
from protocol.types.genesis import GenesisState
from protocol.crypto.addresses import ss58_address
from .runtime import MISSING_RUNTIME_MSG
from .observability import metrics

logger = logging.getLogger(__name__)


def assemble(root: bytes,
             endowed: Sequence[bytes],
             parachain_id: int,
             runtime_code: Optional[bytes],
             balance: int) -> GenesisState:
    """Every endowed account receives the same `balance`, in the given order."""
    return assemble_allocations(
        root,
        [(account, balance) for account in endowed],
        parachain_id,
        runtime_code,
    )


def assemble_allocations(root: bytes,
                         allocations: Iterable[Tuple[bytes, int]],
                         parachain_id: int,
                         runtime_code: Optional[bytes]) -> GenesisState:
    """Builds genesis from explicit (account, balance) pairs."""
    if not runtime_code:
        logger.error("Refusing to assemble genesis without runtime code")
        raise MissingRuntimeError(MISSING_RUNTIME_MSG)

    start = time.perf_counter()
    state = GenesisState(
        code=runtime_code,
        balances=tuple((account, amount) for account, amount in allocations),
        sudo_key=root,
        parachain_id=parachain_id,
    )

    seen = set()
    for account, _ in state.balances:
        if account in seen:
            logger.warning(f"Account {ss58_address(account)} endowed more than once; last balance wins")
        seen.add(account)

    metrics.genesis_assembled_total.inc()
    metrics.genesis_assembly_seconds.observe(time.perf_counter() - start)
    logger.info(
        f"Assembled genesis for para {parachain_id}: {len(state.balances)} endowed accounts, "
        f"sudo {ss58_address(state.sudo_key)}, issuance {state.total_issuance()}"
    )
    return state
