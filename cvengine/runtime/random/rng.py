from __future__ import annotations
import hashlib
import numpy as np

class RngManager:
    """
    Single source of truth for randomness.
    Creates named, order-independent child seeds by hashing:
      child_seed(name) -> stable int seed

    With seed=None the root is drawn from fresh OS entropy, so every run
    partitions differently; pass an int for repeatable runs.
    """
    def __init__(self, seed: int | None):
        if seed is None:
            seed = int(np.random.SeedSequence().entropy)
        # Keep a small, well-defined representation
        self._root = int(seed) & 0xFFFFFFFF

    def _mix(self, name: str) -> int:
        # Stable across runs and Python versions
        h = hashlib.sha256(f"{self._root}:{name}".encode("utf-8")).digest()
        # 32 bits: sklearn's random_state must fit in uint32
        return int.from_bytes(h[:4], "little", signed=False)

    def child_seed(self, name: str) -> int:
        return self._mix(name)
