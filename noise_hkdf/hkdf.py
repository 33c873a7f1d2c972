# MIT License © 2025 Motohiro Suzuki
"""
noise_hkdf.hkdf

HMAC-based Extract-and-Expand Key Derivation Function (RFC 5869) as used by
the Noise symmetric state (MixKey / MixKeyAndHash / Split).

    temp_key = HMAC(chaining_key, input_key_material)     # extract
    output1  = HMAC(temp_key, 0x01)                       # expand
    output2  = HMAC(temp_key, output1 || 0x02)
    output3  = HMAC(temp_key, output2 || 0x03)            # 3-output form only

The instance owns two hash contexts (inner / outer) that are reused for every
HMAC evaluation. It is NOT reentrant: hold one instance per handshake session
or serialize calls externally.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from .errors import ContractViolation, HkdfClosedError
from .hashes import Hash
from .zeroize import wipe_bytes_like

logger = logging.getLogger(__name__)

_ONE = b"\x01"
_TWO = b"\x02"
_THREE = b"\x03"

_IPAD = 0x36
_OPAD = 0x5C


def _require_bytes_like(name: str, value) -> None:
    if not isinstance(value, (bytes, bytearray, memoryview)):
        raise TypeError(f"{name} must be bytes-like")


class Hkdf:
    """
    Two/three output HKDF over a reusable pair of hash contexts.

        with Hkdf(SHA256) as hkdf:
            ck, k = split(hkdf.extract_and_expand2(ck, dh_output))
    """

    def __init__(self, hash_factory: Callable[[], Hash]) -> None:
        self._inner: Optional[Hash] = hash_factory()
        self._outer: Optional[Hash] = hash_factory()
        if self._inner.hash_len > self._inner.block_len:
            self.close()
            raise ContractViolation("hash_len must not exceed block_len")
        logger.debug("hkdf ready (hash=%s)", self._inner.name)

    @property
    def hash_len(self) -> int:
        return self._contexts()[0].hash_len

    @property
    def block_len(self) -> int:
        return self._contexts()[0].block_len

    @property
    def closed(self) -> bool:
        return self._inner is None

    def _contexts(self):
        if self._inner is None or self._outer is None:
            raise HkdfClosedError("hkdf already closed")
        return self._inner, self._outer

    # ===== public API =====
    def extract_and_expand2(self, chaining_key, input_key_material, output=None):
        """
        Takes a chaining_key of hash_len bytes and input_key_material of
        0, 32 or DHLEN bytes; produces 2 * hash_len bytes.

        If `output` is given it must be a writable buffer of exactly
        2 * hash_len bytes; it is filled in place and returned.
        Otherwise a new bytes object is returned.
        """
        return self._extract_and_expand(2, chaining_key, input_key_material, output)

    def extract_and_expand3(self, chaining_key, input_key_material, output=None):
        """
        Same as extract_and_expand2 with a third output block chained on
        the second one; produces 3 * hash_len bytes.
        """
        return self._extract_and_expand(3, chaining_key, input_key_material, output)

    # ===== internals =====
    def _extract_and_expand(self, blocks: int, chaining_key, input_key_material, output):
        hash_len = self.hash_len
        _require_bytes_like("chaining_key", chaining_key)
        _require_bytes_like("input_key_material", input_key_material)

        if memoryview(chaining_key).nbytes != hash_len:
            raise ContractViolation(f"chaining_key must be {hash_len} bytes")

        size = blocks * hash_len
        if output is None:
            result = bytearray(size)
            try:
                self._derive(blocks, chaining_key, input_key_material, memoryview(result))
                return bytes(result)
            finally:
                wipe_bytes_like(result)

        _require_bytes_like("output", output)
        view = memoryview(output).cast("B")
        if view.readonly:
            raise ContractViolation("output buffer is read-only")
        if view.nbytes != size:
            raise ContractViolation(f"output must be {size} bytes")
        self._derive(blocks, chaining_key, input_key_material, view)
        return output

    def _derive(self, blocks: int, chaining_key, input_key_material, out: memoryview) -> None:
        hash_len = self.hash_len
        temp_key = bytearray(hash_len)
        try:
            self._hmac_hash(chaining_key, temp_key, input_key_material)

            output1 = out[0:hash_len]
            self._hmac_hash(temp_key, output1, _ONE)

            output2 = out[hash_len:2 * hash_len]
            self._hmac_hash(temp_key, output2, output1, _TWO)

            if blocks == 3:
                output3 = out[2 * hash_len:3 * hash_len]
                self._hmac_hash(temp_key, output3, output2, _THREE)
        finally:
            wipe_bytes_like(temp_key)

    def _hmac_hash(self, key, hmac, *data) -> None:
        """
        hmac = HMAC(key, data[0] || data[1]) with a hash_len key.

        `data` holds zero, one or two segments fed in order. The result is
        written into the writable buffer `hmac` of exactly hash_len bytes.
        """
        inner, outer = self._contexts()
        hash_len = inner.hash_len
        block_len = inner.block_len

        assert len(data) <= 2
        assert memoryview(key).nbytes == hash_len
        assert memoryview(hmac).nbytes == hash_len

        ipad = bytearray(block_len)
        opad = bytearray(block_len)
        try:
            ipad[:hash_len] = key
            opad[:hash_len] = key

            for i in range(block_len):
                ipad[i] ^= _IPAD
                opad[i] ^= _OPAD

            inner.append_data(ipad)
            for segment in data:
                inner.append_data(segment)
            inner.get_hash_and_reset(hmac)

            outer.append_data(opad)
            outer.append_data(hmac)
            outer.get_hash_and_reset(hmac)
        finally:
            wipe_bytes_like(ipad)
            wipe_bytes_like(opad)

    # ===== lifecycle =====
    def close(self) -> None:
        """Release both hash contexts. Safe to call more than once."""
        if self._inner is None:
            return
        inner, outer = self._inner, self._outer
        self._inner = None
        self._outer = None
        inner.close()
        if outer is not None:
            outer.close()
        logger.debug("hkdf closed")

    def __enter__(self) -> "Hkdf":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def __del__(self) -> None:
        if getattr(self, "_inner", None) is not None:
            self.close()
