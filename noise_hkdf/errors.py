# MIT License © 2025 Motohiro Suzuki
"""
noise_hkdf.errors

Exception types raised by the key derivation primitives.

Contract violations (wrong secret lengths, wrong output sizes) are programming
defects: they are raised immediately and never retried.
"""


class HkdfError(Exception):
    pass


class ContractViolation(HkdfError, ValueError):
    """A caller passed a buffer whose length breaks the HashLen contract."""


class HkdfClosedError(HkdfError, RuntimeError):
    """The object was used after close()."""


class HashClosedError(HkdfClosedError):
    pass


class UnsupportedHashError(HkdfError, ValueError):
    pass


class ConfigError(HkdfError, ValueError):
    pass
