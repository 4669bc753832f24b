"""Presentation CLI exports."""
from .probe_command import ProbeCommand, ProbeOptions, render_report, select_hosts
from .servers_command import ServersCommand, roster_summary

__all__ = [
    "ProbeCommand",
    "ProbeOptions",
    "render_report",
    "select_hosts",
    "ServersCommand",
    "roster_summary",
]
