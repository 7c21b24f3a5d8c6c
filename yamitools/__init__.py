"""Building blocks for video codec tooling: alignment helpers, a non-copyable base and levelled logging."""

__version__ = "0.1.0"
__all__ = ["common", "log"]