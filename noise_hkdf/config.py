# MIT License © 2025 Motohiro Suzuki
"""
noise_hkdf.config

Selects the hash function used by the HKDF.

Sources, lowest to highest priority:
  - defaults (SHA256)
  - YAML file, either a top-level mapping or one nested under `hkdf:`
  - environment variable NOISE_HKDF_HASH
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Optional, Union

import yaml

from .errors import ConfigError
from .hashes import hash_factory
from .hkdf import Hkdf

logger = logging.getLogger(__name__)

ENV_HASH = "NOISE_HKDF_HASH"
DEFAULT_HASH = "SHA256"


class HkdfConfig:
    """
    Accepts both naming styles:
      - hash / hash_name
    Unknown keys are ignored so that a shared protocol config file can be
    passed in as-is.
    """

    def __init__(
        self,
        hash_name: str = DEFAULT_HASH,
        hash: Optional[str] = None,
        **_extra: Any,
    ) -> None:
        if hash is not None:
            hash_name = hash
        self.hash_name = str(hash_name)
        # fail early on typos
        hash_factory(self.hash_name)

    def __repr__(self) -> str:
        return f"HkdfConfig(hash_name={self.hash_name!r})"


def load_config(path: Optional[Union[str, Path]] = None) -> HkdfConfig:
    data: dict = {}
    if path is not None:
        path = Path(path)
        if not path.exists():
            raise ConfigError(f"config file not found: {path}")
        doc = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        if not isinstance(doc, dict):
            raise ConfigError(f"{path}: top level must be a mapping")
        section = doc.get("hkdf", doc)
        if not isinstance(section, dict):
            raise ConfigError(f"{path}: 'hkdf' must be a mapping")
        data = dict(section)
        logger.debug("loaded hkdf config from %s", path)

    env_hash = os.environ.get(ENV_HASH)
    if env_hash:
        logger.debug("%s overrides hash to %s", ENV_HASH, env_hash)
        data.pop("hash", None)
        data["hash_name"] = env_hash

    return HkdfConfig(**data)


def make_hkdf(config: Optional[HkdfConfig] = None) -> Hkdf:
    """Factory returning an Hkdf for the configured hash (default: environment / SHA256)."""
    if config is None:
        config = load_config()
    return Hkdf(hash_factory(config.hash_name))
