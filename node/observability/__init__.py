# MIT License
# Copyright (c) 2025 Hashborn

"""
Observability Module

Build metrics for chain spec and genesis generation.
"""

from .metrics import metrics_registry, metric_value

__all__ = ['metrics_registry', 'metric_value']
