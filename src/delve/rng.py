from __future__ import annotations

import hashlib
import json
import logging
import random
import secrets
from dataclasses import dataclass
from typing import Any, Union

logger = logging.getLogger(__name__)

Seed = Union[int, str, bytes, None]


def _to_stable_json(value: Any) -> str:
    """Stable JSON encoding for hashing.

    Consistent key ordering and separators keep seed derivation identical
    across runs and interpreter versions.
    """
    return json.dumps(value, sort_keys=True, separators=(",", ":"), ensure_ascii=False)


@dataclass(frozen=True)
class RNGManager:
    """Derives independent, reproducible RNG streams from one master seed.

    Every stream is keyed by a domain plus identifiers, so the stream used to
    lay out floor 3 does not depend on how many numbers were drawn for floor 2:

        rngm = RNGManager(0)
        layout_rng = rngm.context_rng("floor_layout", 3, 0)
        spawn_rng = rngm.context_rng("floor_population", 3)

    The master seed can be an int, str, or bytes. ``None`` picks a random
    master seed once; streams derived from that manager are still stable for
    its lifetime.
    """

    master_seed: Seed = 0

    def __post_init__(self) -> None:
        if self.master_seed is None:
            rand = secrets.token_bytes(16)
            object.__setattr__(self, "_master_seed_bytes", rand)
            logger.info("No master seed provided; generated random seed: %s", rand.hex())
        else:
            object.__setattr__(self, "_master_seed_bytes", self._canonicalize_seed(self.master_seed))
            logger.debug("Using master seed: %r", self.master_seed)

    @staticmethod
    def _canonicalize_seed(seed: Union[int, str, bytes]) -> bytes:
        if isinstance(seed, bytes):
            return seed
        if isinstance(seed, bool):
            raise TypeError("Unsupported seed type: %r" % (type(seed),))
        if isinstance(seed, int):
            if seed < 0:
                raise ValueError("Seed must be non-negative, got %d" % seed)
            length = (seed.bit_length() + 7) // 8 or 1
            return seed.to_bytes(length, "big", signed=False)
        if isinstance(seed, str):
            return seed.strip().encode("utf-8")
        raise TypeError("Unsupported seed type: %r" % (type(seed),))

    def derive_seed(self, domain: str, *identifiers: Any) -> int:
        """Derive a 64-bit integer seed from the master seed and a domain key.

        Domains used by the engine: "floor_layout", "floor_population",
        "monster_ai".
        """
        payload = {
            "domain": domain,
            "ids": identifiers,
            "master": self._master_seed_bytes.hex(),
            "algo": "blake2b-64",
            "version": 1,
        }
        data = _to_stable_json(payload).encode("utf-8")
        h = hashlib.blake2b(data, digest_size=8)
        seed_int = int.from_bytes(h.digest(), "big", signed=False)
        logger.debug("Derived seed for domain=%s ids=%s -> %d", domain, identifiers, seed_int)
        return seed_int

    def context_rng(self, domain: str, *identifiers: Any) -> random.Random:
        return random.Random(self.derive_seed(domain, *identifiers))


__all__ = ["RNGManager", "Seed"]
