from __future__ import annotations


class ProbeConfigurationError(ValueError):
    """Raised when a probe run is requested with an unusable configuration."""
