"""Runtime services shared by the text operations."""

from . import telemetry

__all__ = ["telemetry"]
