"""Application services root exports."""
from .probing import (
    ConcurrencyLimiter,
    HostProbeOrchestrator,
    KnownInfrastructureClassifier,
    ProbeManager,
    ResultRanker,
)

__all__ = [
    "ConcurrencyLimiter",
    "HostProbeOrchestrator",
    "KnownInfrastructureClassifier",
    "ProbeManager",
    "ResultRanker",
]
