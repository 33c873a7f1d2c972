# MIT License © 2025 Motohiro Suzuki
"""
noise_hkdf.zeroize

Best-effort zeroization of scratch buffers holding key material.

Python bytes are immutable, so a full wipe cannot be guaranteed.
Mutable buffers (bytearray / writable memoryview) are overwritten in place.
"""

from __future__ import annotations

from typing import Any


def wipe_bytes_like(x: Any) -> None:
    """
    Overwrite a mutable buffer with zeros.
    - bytearray: in-place overwrite
    - writable memoryview: in-place overwrite
    - bytes / readonly memoryview: no-op
    Anything else raises TypeError.
    """
    if isinstance(x, bytearray):
        x[:] = bytes(len(x))
        return

    if isinstance(x, memoryview):
        if not x.readonly:
            x.cast("B")[:] = bytes(x.nbytes)
        return

    if isinstance(x, bytes):
        return

    raise TypeError(f"cannot wipe object of type {type(x).__name__}")
