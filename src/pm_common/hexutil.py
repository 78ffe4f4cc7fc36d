"""Hex helpers for asset ids."""


def reverse_hex(value: str) -> str:
    """Reverse byte order of a hex string: 'a1b2c3' -> 'c3b2a1'.

    Wallet balances are keyed by the internal (little-endian) asset id while
    market records carry the display (big-endian) form. A trailing odd nibble
    is dropped.
    """
    pairs = [value[i:i + 2] for i in range(0, len(value) - 1, 2)]
    return "".join(reversed(pairs))
