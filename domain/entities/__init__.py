"""Domain entities."""
from .host_spec import HostSpec
from .probe_attempt import ProbeAttempt
from .probe_outcome import ProbeOutcome
from .client_info import ClientInfo

__all__ = [
    'HostSpec',
    'ProbeAttempt',
    'ProbeOutcome',
    'ClientInfo',
]
