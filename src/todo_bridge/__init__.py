"""Task list front end backed by an external worker process."""

__version__ = "0.1.0"
