"""Application use cases."""
from .probe_servers import ProbeServersUseCase

__all__ = [
    'ProbeServersUseCase',
]
