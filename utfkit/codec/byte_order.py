"""Storage unit byte swapping."""

from __future__ import annotations


def swap16(unit: int) -> int:
    """Swap the two bytes of a 16-bit storage unit."""
    return ((unit & 0x00FF) << 8) | ((unit >> 8) & 0x00FF)


def swap32(unit: int) -> int:
    """Swap the four bytes of a 32-bit storage unit."""
    return (
        ((unit & 0x000000FF) << 24)
        | ((unit & 0x0000FF00) << 8)
        | ((unit >> 8) & 0x0000FF00)
        | ((unit >> 24) & 0x000000FF)
    )
