"""CompHub - compensation operations task hub."""

__version__ = "0.1.0"
