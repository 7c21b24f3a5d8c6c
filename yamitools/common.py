"""Small shared helpers: alignment arithmetic and a non-copyable base."""

from __future__ import annotations


class NonCopyable:
    """Base class for objects that own a resource and must not be copied."""

    def __copy__(self):
        raise TypeError(f"{type(self).__name__} objects cannot be copied")

    def __deepcopy__(self, memo):
        raise TypeError(f"{type(self).__name__} objects cannot be copied")


def align_pow2(value: int, alignment: int) -> int:
    """Round ``value`` up to the next multiple of the power-of-two ``alignment``."""
    if alignment <= 0 or alignment & (alignment - 1):
        raise ValueError(f"alignment must be a positive power of two, got {alignment}")
    return (value + (alignment - 1)) & ~(alignment - 1)


def align8(value: int) -> int:
    """Round ``value`` up to a multiple of 8."""
    return align_pow2(value, 8)


def align16(value: int) -> int:
    """Round ``value`` up to a multiple of 16."""
    return align_pow2(value, 16)


def align32(value: int) -> int:
    """Round ``value`` up to a multiple of 32."""
    return align_pow2(value, 32)