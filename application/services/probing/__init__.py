from .errors import ProbeConfigurationError
from .concurrency_limiter import ConcurrencyLimiter
from .infrastructure_classifier import KnownInfrastructureClassifier
from .host_probe_orchestrator import HostProbeOrchestrator, ProbeStage
from .result_ranker import ResultRanker, compare_outcomes
from .models import ProbeStats, ProbeReport
from .probe_manager import ProbeManager, DEFAULT_CONCURRENCY

__all__ = [
    "ProbeConfigurationError",
    "ConcurrencyLimiter",
    "KnownInfrastructureClassifier",
    "HostProbeOrchestrator",
    "ProbeStage",
    "ResultRanker",
    "compare_outcomes",
    "ProbeStats",
    "ProbeReport",
    "ProbeManager",
    "DEFAULT_CONCURRENCY",
]
