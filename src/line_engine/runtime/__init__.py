"""Runtime services (logging and timing) shared by the engine."""

from . import telemetry

__all__ = ["telemetry"]
