"""arbsign — validate and sign ArbSupervisor opportunities."""

__version__ = "0.1.0"
