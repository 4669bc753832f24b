"""Presentation layer - User interfaces."""
from .cli import ProbeCommand, ServersCommand

__all__ = [
    "ProbeCommand",
    "ServersCommand",
]
