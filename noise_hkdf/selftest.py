# MIT License © 2025 Motohiro Suzuki
"""
noise_hkdf/selftest.py

Known-answer test for every supported hash.

    python -m noise_hkdf.selftest [--hash SHA256]

Vectors:
  - RFC 5869 test case 3 (SHA-256, zero-length salt and info, 22-byte IKM).
    A zero-length salt is HMAC-equivalent to a hash_len zero chaining key.
  - per-hash derivation with chaining_key = 0^hash_len, ikm = 00 01 .. 1f.
"""

from __future__ import annotations

import argparse
from typing import List, Optional

from .hashes import HASHES, hash_factory
from .hkdf import Hkdf

RFC5869_CASE3_IKM = bytes([0x0B]) * 22
RFC5869_CASE3_OKM = bytes.fromhex(
    "8da4e775a563c18f715f802a063c5a31"
    "b8a11f5c5ee1879ec3454e5f3c738d2d"
    "9d201395faa4b61a96c8"
)

KAT_IKM = bytes(range(32))

KAT_OUTPUTS = {
    "SHA256": (
        "37ad29109f43265287804b674e2653d0a513718907f97fca97c95bded8104bbf",
        "9601b7e7a7d5a882b151679d3bba7d1ecf9681ad0509bfa68434e1bfa767a51d",
        "b8133e691b64d477f96d6e4d4b8b04c01d397fec72be357d45e84855aeba402e",
    ),
    "SHA512": (
        "f5def084b086c3aea7c1ea1693f66dc54d414765f65467e0ff0bf1e7fed491c9"
        "6bc7e8921b5df55ed1dc990afc0bf8cd0ea225ad5aa2aebde9184b30b2c9b546",
        "479fd14b3df278ffb785d8ca52305b1fef1c2f5708b0c6742b069211e7a9e931"
        "59b4377a8552b0b6910635fafb27ded8f83bc1fd6e1c62fec244a4a4c32f6e5b",
        "d438bdf62c73661299ab4056f2b9f704a4fe032c4b7c55a6eeba84bebdaaa66c"
        "eab0b7220b85c3003c3446ba10b2d97dbd0eb9f392e9b9058733b8b5e23dd9ad",
    ),
    "BLAKE2s": (
        "d36c68692b681300676744097a482d8e0161a95bc9ed309b17bd78eafa8c49ae",
        "d1c083372bc55d11d5b9173caae8f0322d1de371ec5cb4d7ee1b24b682e21202",
        "fcc1b8326d2a018ae1f29650e9cae0efad7c000117ce598066dea1e7356080c8",
    ),
    "BLAKE2b": (
        "5f00fc95cfc2e3645f60393222f709d9e4c41314a55392eb5c5b7b04e33096fd"
        "014a71113695694a85ad56af0bc25c94ff08bfd0dbc8bb5e2862aa4b983877a5",
        "a5e3c028beff14c78b280cb3da7e47935530922fa7cbdebfdcb8d5564207ad22"
        "514c6c17bf2ebd1e5bfbbc84e8136f87cb9a6c79b74ab82c875a3d907c96d94a",
        "2f8cae8120539a6308dc1d602d2e2e46d521a3a6b867266d3222cfcd6e24956c"
        "8f82b4ee96d8232ced2737dd86c6951ef52b3f77784a2a3a7479a613d7b14f7b",
    ),
}


def check_rfc5869_case3() -> bool:
    with Hkdf(hash_factory("SHA256")) as hkdf:
        okm = hkdf.extract_and_expand2(bytes(32), RFC5869_CASE3_IKM)
    return okm[: len(RFC5869_CASE3_OKM)] == RFC5869_CASE3_OKM


def check_hash(name: str) -> bool:
    expected = bytes.fromhex("".join(KAT_OUTPUTS[name]))
    with Hkdf(hash_factory(name)) as hkdf:
        ck = bytes(hkdf.hash_len)
        two = hkdf.extract_and_expand2(ck, KAT_IKM)
        three = hkdf.extract_and_expand3(ck, KAT_IKM)
    return three == expected and two == expected[: len(two)]


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(prog="noise_hkdf.selftest", description="HKDF known-answer tests")
    ap.add_argument("--hash", choices=sorted(HASHES), default=None, help="only test this hash")
    args = ap.parse_args(argv)

    names = [args.hash] if args.hash else sorted(KAT_OUTPUTS)
    ok = True

    if args.hash in (None, "SHA256"):
        if check_rfc5869_case3():
            print("[OK] RFC 5869 test case 3")
        else:
            print("[FAIL] RFC 5869 test case 3")
            ok = False

    for name in names:
        if check_hash(name):
            print(f"[OK] {name} known answer")
        else:
            print(f"[FAIL] {name} known answer")
            ok = False

    return 0 if ok else 1


if __name__ == "__main__":
    raise SystemExit(main())
