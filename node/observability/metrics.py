# MIT License
# Copyright (c) 2025 Hashborn

"""
Chain Spec Build Metrics

Counters for chain spec generation, kept in a private registry so a launcher
can expose them next to its own metrics.

Metrics:
- Chain specs built, per preset
- Accounts derived from seeds
- Genesis assemblies and their duration
"""

from typing import Optional
from prometheus_client import Counter, Histogram, CollectorRegistry

# Create registry for metrics
metrics_registry = CollectorRegistry()

chain_specs_built_total = Counter(
    'mathchain_chain_specs_built_total',
    'Chain specs built, by preset id',
    ['chain_id'],
    registry=metrics_registry
)

accounts_derived_total = Counter(
    'mathchain_accounts_derived_total',
    'Accounts derived from seeds',
    registry=metrics_registry
)

genesis_assembled_total = Counter(
    'mathchain_genesis_assembled_total',
    'Genesis states assembled',
    registry=metrics_registry
)

genesis_assembly_seconds = Histogram(
    'mathchain_genesis_assembly_seconds',
    'Time spent assembling a genesis state',
    buckets=[0.001, 0.01, 0.05, 0.1, 0.5, 1, 5],
    registry=metrics_registry
)


def metric_value(name: str, labels: Optional[dict] = None) -> float:
    """Current sample value from the registry (0.0 if never observed)."""
    value = metrics_registry.get_sample_value(name, labels or {})
    return value if value is not None else 0.0
