"""Job payments server: contracts, jobs and the balance transaction engine."""

__version__ = "0.1.0"
