# MIT License © 2025 Motohiro Suzuki
"""
noise_hkdf

HKDF (RFC 5869) for the Noise protocol symmetric key ratchet.
"""

from .config import HkdfConfig, load_config, make_hkdf
from .errors import (
    ConfigError,
    ContractViolation,
    HashClosedError,
    HkdfClosedError,
    HkdfError,
    UnsupportedHashError,
)
from .hashes import BLAKE2b, BLAKE2s, Hash, SHA256, SHA512, hash_factory
from .hkdf import Hkdf
from .zeroize import wipe_bytes_like

__all__ = [
    "BLAKE2b",
    "BLAKE2s",
    "ConfigError",
    "ContractViolation",
    "Hash",
    "HashClosedError",
    "Hkdf",
    "HkdfClosedError",
    "HkdfConfig",
    "HkdfError",
    "SHA256",
    "SHA512",
    "UnsupportedHashError",
    "hash_factory",
    "load_config",
    "make_hkdf",
    "wipe_bytes_like",
]
