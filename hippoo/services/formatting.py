from __future__ import annotations

import math

from hippoo.models.package import TransferTime

# Bandwidth profiles for download estimates, in kilobits per second.
SLOW_KBPS = 50
FAST_KBPS = 1000

_KB = 1024
_MB = 1024 * 1024


def format_bytes(size: int) -> str:
    if size < _KB:
        return f"{size}B"
    if size < _MB:
        return f"{size / _KB:.1f} kB"
    return f"{size / _MB:.1f} MB"


def transfer_ms(size: int, kbps: int) -> float:
    """Unrounded transfer time of *size* bytes at *kbps*, in milliseconds."""
    return (size / _KB) * 8 / kbps


def format_transfer_time(size: int) -> TransferTime:
    return TransferTime(
        slow_ms=math.ceil(transfer_ms(size, SLOW_KBPS)),
        fast_ms=math.ceil(transfer_ms(size, FAST_KBPS)),
    )


def format_ms(ms: int) -> str:
    return f"{ms}ms"


def display_name(name: str) -> str:
    return name[:1].upper() + name[1:]
