"""Configuration: settings and the default server roster."""
from .settings import settings, Settings
from .timeout_config import ProbeTimeoutConfig

__all__ = [
    'settings',
    'Settings',
    'ProbeTimeoutConfig',
]
