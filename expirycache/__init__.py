"""Thread-safe in-memory cache with per-entry expiry and background cleanup."""

__version__ = "0.1.0"
__all__ = ["eviction", "model", "storage", "example"]