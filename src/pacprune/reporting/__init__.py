"""Human-readable and JSON rendering of sweep reports."""

from .stdout import SweepReporter

__all__ = ["SweepReporter"]
