"""Fixed-width integer helpers."""

from __future__ import annotations

_WIDTHS = (8, 16, 32, 64)


def to_fixed(value: int, bits: int, signed: bool) -> int:
    """Wrap ``value`` to a fixed-width integer of ``bits`` bits.

    Behaves like conversion to the corresponding C fixed-width type,
    using two's complement for signed results.
    """
    if bits not in _WIDTHS:
        raise ValueError(f"unsupported integer width: {bits}")
    modulus = 1 << bits
    wrapped = int(value) % modulus
    if signed and wrapped >= modulus >> 1:
        wrapped -= modulus
    return wrapped