# MIT License © 2025 Motohiro Suzuki
"""
tests/test_hashes.py

Contract:
- Each hash reports its Noise name, hash_len and block_len.
- get_hash_and_reset writes the digest of everything appended since the
  last reset, then starts a fresh message.
- A closed hash refuses further use (HashClosedError).
"""

import hashlib

import pytest

from noise_hkdf import (
    BLAKE2b,
    BLAKE2s,
    ContractViolation,
    HashClosedError,
    SHA256,
    SHA512,
    UnsupportedHashError,
    hash_factory,
)

CASES = [
    (SHA256, "SHA256", 32, 64, hashlib.sha256),
    (SHA512, "SHA512", 64, 128, hashlib.sha512),
    (BLAKE2s, "BLAKE2s", 32, 64, hashlib.blake2s),
    (BLAKE2b, "BLAKE2b", 64, 128, hashlib.blake2b),
]


@pytest.mark.parametrize("cls, name, hash_len, block_len, _ref", CASES)
def test_sizes(cls, name, hash_len, block_len, _ref):
    with cls() as h:
        assert h.name == name
        assert h.hash_len == hash_len
        assert h.block_len == block_len
        assert hash_factory(name) is cls


@pytest.mark.parametrize("cls, name, hash_len, block_len, ref", CASES)
def test_digest_and_reset(cls, name, hash_len, block_len, ref):
    with cls() as h:
        out = bytearray(hash_len)

        h.append_data(b"hello ")
        h.append_data(bytearray(b"noise"))
        h.get_hash_and_reset(out)
        assert bytes(out) == ref(b"hello noise").digest()

        # fresh message after reset
        h.append_data(memoryview(b"second"))
        h.get_hash_and_reset(out)
        assert bytes(out) == ref(b"second").digest()


def test_empty_message():
    with SHA256() as h:
        out = bytearray(32)
        h.append_data(b"")
        h.get_hash_and_reset(out)
        assert bytes(out) == hashlib.sha256(b"").digest()


def test_digest_into_larger_buffer():
    with SHA256() as h:
        out = bytearray(b"\xee" * 40)
        h.append_data(b"abc")
        h.get_hash_and_reset(out)
        assert bytes(out[:32]) == hashlib.sha256(b"abc").digest()
        assert out[32:] == b"\xee" * 8


def test_output_too_small():
    with SHA512() as h:
        with pytest.raises(ContractViolation):
            h.get_hash_and_reset(bytearray(32))


def test_output_read_only():
    with SHA256() as h:
        with pytest.raises(ContractViolation):
            h.get_hash_and_reset(bytes(32))


def test_closed_hash_refuses_use():
    h = BLAKE2s()
    h.close()
    h.close()
    assert h.closed
    with pytest.raises(HashClosedError):
        h.append_data(b"x")
    with pytest.raises(HashClosedError):
        h.get_hash_and_reset(bytearray(32))


def test_unknown_hash_name():
    with pytest.raises(UnsupportedHashError) as e:
        hash_factory("MD5")
    assert "SHA256" in str(e.value)
