# MIT License
# Copyright (c) 2025 Hashborn

import os
import logging
from typing import Optional
from protocol.types.common import MissingRuntimeError

logger = logging.getLogger(__name__)

RUNTIME_ENV_VAR = "MATHCHAIN_RUNTIME_WASM"
DEFAULT_RUNTIME_PATH = os.path.join(
    "runtime", "target", "release", "wbuild", "mathchain-runtime", "mathchain_runtime.compact.wasm"
)

MISSING_RUNTIME_MSG = "WASM binary was not build, please build it!"

def runtime_path(path: Optional[str] = None) -> str:
    """Explicit path, else $MATHCHAIN_RUNTIME_WASM, else the cargo output path."""
    return path or os.environ.get(RUNTIME_ENV_VAR) or DEFAULT_RUNTIME_PATH

def load_runtime_code(path: Optional[str] = None) -> bytes:
    """Reads the compiled runtime blob. Missing or empty blob is fatal."""
    wasm_path = runtime_path(path)
    if not os.path.isfile(wasm_path):
        logger.error(f"Runtime wasm not found at {wasm_path}")
        raise MissingRuntimeError(f"{MISSING_RUNTIME_MSG} ({wasm_path})")

    with open(wasm_path, "rb") as f:
        code = f.read()

    if not code:
        logger.error(f"Runtime wasm at {wasm_path} is empty")
        raise MissingRuntimeError(f"{MISSING_RUNTIME_MSG} ({wasm_path} is empty)")

    logger.info(f"Loaded runtime wasm from {wasm_path} ({len(code)} bytes)")
    return code
