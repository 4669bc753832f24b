"""Application layer - Services and use cases."""
from .services import ProbeManager, HostProbeOrchestrator
from .use_cases import ProbeServersUseCase

__all__ = [
    'ProbeManager',
    'HostProbeOrchestrator',
    'ProbeServersUseCase',
]
