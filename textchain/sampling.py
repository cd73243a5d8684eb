import random
from typing import Any, Mapping, Optional, Sequence


def _uniform_index(size: int, rng=None) -> Optional[int]:
    if size <= 0:
        return None
    rng = rng or random
    return int(rng.random() * size)


def sample_from_sequence(seq: Optional[Sequence[Any]], rng=None) -> Any:
    """Uniformly pick one element of ``seq``; None when it is empty or missing."""
    if not seq:
        return None
    idx = _uniform_index(len(seq), rng)
    return seq[idx]


def sample_key(mapping: Optional[Mapping[Any, Any]], rng=None) -> Any:
    """Uniformly pick one key of ``mapping``, ignoring its values."""
    if not mapping:
        return None
    keys = list(mapping.keys())
    idx = _uniform_index(len(keys), rng)
    return keys[idx]
