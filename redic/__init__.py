"""A non-blocking TCP server that echoes length-prefixed messages."""

__version__ = "0.1.0"
__all__ = ["protocol", "server", "vector"]