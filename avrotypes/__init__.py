"""Resolve Avro type names to Python types and back; see avrotypes.resolver."""

__version__ = "0.1.0"
__all__ = ["resolver"]