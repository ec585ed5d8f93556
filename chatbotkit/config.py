"""Persistent bot configuration stored as MessagePack."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

import msgpack

FILENAME = "config.dat"

_log = logging.getLogger(__name__)


@dataclass
class Config:
    """Bot settings that survive restarts."""

    markov_chain_learning: set[int] = field(default_factory=set)

    def save(self, path: str | Path = FILENAME) -> None:
        """Write the configuration to ``path``."""
        _log.debug("saving bot config to drive")
        payload = {"markov_chain_learning": sorted(self.markov_chain_learning)}
        Path(path).write_bytes(msgpack.packb(payload, use_bin_type=True))


def load_config(path: str | Path = FILENAME) -> Config:
    """Load the configuration from ``path``, or a default one if it does not exist."""
    path = Path(path)
    if not path.exists():
        _log.debug("creating default bot config")
        return Config()

    _log.debug("loading bot config from drive")
    data = msgpack.unpackb(path.read_bytes(), raw=False)

    if isinstance(data, dict):
        learning = data.get("markov_chain_learning", [])
    elif isinstance(data, list):
        learning = data[0] if data else []
    else:
        raise ValueError(f"invalid config file: {path}")

    if not isinstance(learning, list):
        raise ValueError(f"invalid config file: {path}")
    return Config(markov_chain_learning={int(chat_id) for chat_id in learning})