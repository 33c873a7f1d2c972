# MIT License © 2025 Motohiro Suzuki
"""
noise_hkdf.hashes

Hash capability consumed by the HKDF:

    hash_len / block_len        fixed sizes of the algorithm
    append_data(data)           feed bytes into the running digest
    get_hash_and_reset(out)     finalize into `out`, start a fresh message
    close()                     release the running context

The concrete algorithms wrap `cryptography.hazmat.primitives.hashes.Hash`.
A finalized cryptography context cannot be reused, so "reset" means opening
a new context for the same algorithm.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Optional

from cryptography.hazmat.primitives import hashes

from .errors import ContractViolation, HashClosedError, UnsupportedHashError

logger = logging.getLogger(__name__)


class Hash:
    """
    One running digest computation.

    Not thread-safe: each instance is a single-writer object.
    """

    name: str = ""
    hash_len: int = 0
    block_len: int = 0

    def __init__(self) -> None:
        self._ctx: Optional[hashes.Hash] = self._new_context()
        logger.debug("opened %s context", self.name)

    def _algorithm(self) -> hashes.HashAlgorithm:
        raise NotImplementedError

    def _new_context(self) -> hashes.Hash:
        return hashes.Hash(self._algorithm())

    def _context(self) -> hashes.Hash:
        if self._ctx is None:
            raise HashClosedError(f"{self.name} hash already closed")
        return self._ctx

    @property
    def closed(self) -> bool:
        return self._ctx is None

    def append_data(self, data) -> None:
        ctx = self._context()
        if len(data) == 0:
            return
        ctx.update(data)

    def get_hash_and_reset(self, out) -> None:
        """Write the digest into the first hash_len bytes of `out`."""
        ctx = self._context()
        view = memoryview(out)
        if view.readonly or view.nbytes < self.hash_len:
            raise ContractViolation(
                f"{self.name}: output must be a writable buffer of at least {self.hash_len} bytes"
            )
        digest = ctx.finalize()
        self._ctx = self._new_context()
        view[: self.hash_len] = digest

    def close(self) -> None:
        if self._ctx is None:
            return
        self._ctx = None
        logger.debug("closed %s context", self.name)

    def __enter__(self) -> "Hash":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def __repr__(self) -> str:
        state = "closed" if self.closed else "open"
        return f"<{type(self).__name__} {state}>"


class SHA256(Hash):
    name = "SHA256"
    hash_len = 32
    block_len = 64

    def _algorithm(self) -> hashes.HashAlgorithm:
        return hashes.SHA256()


class SHA512(Hash):
    name = "SHA512"
    hash_len = 64
    block_len = 128

    def _algorithm(self) -> hashes.HashAlgorithm:
        return hashes.SHA512()


class BLAKE2s(Hash):
    name = "BLAKE2s"
    hash_len = 32
    block_len = 64

    def _algorithm(self) -> hashes.HashAlgorithm:
        return hashes.BLAKE2s(digest_size=32)


class BLAKE2b(Hash):
    name = "BLAKE2b"
    hash_len = 64
    block_len = 128

    def _algorithm(self) -> hashes.HashAlgorithm:
        return hashes.BLAKE2b(digest_size=64)


HASHES: Dict[str, Callable[[], Hash]] = {
    cls.name: cls for cls in (SHA256, SHA512, BLAKE2s, BLAKE2b)
}


def hash_factory(name: str) -> Callable[[], Hash]:
    """
    Resolve a Noise hash name ("SHA256", "SHA512", "BLAKE2s", "BLAKE2b")
    to a zero-argument constructor.
    """
    try:
        return HASHES[name]
    except KeyError:
        supported = ", ".join(sorted(HASHES))
        raise UnsupportedHashError(f"unsupported hash {name!r} (supported: {supported})") from None
