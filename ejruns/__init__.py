"""ejruns - submission reports for ejudge contests."""

__version__ = "1.0.0"
