"""Record, scan and locking layers of a small relational database engine."""

__version__ = "0.1.0"