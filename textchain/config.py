import os
from typing import Optional, Union

DEFAULT_ORDER = 3
DEFAULT_LENGTH = 30

SEED_CORPUS = [
    "the quick brown fox jumps over the lazy dog",
    "markov chains generate text one character at a time",
    "the lazy dog sleeps while the brown fox runs",
]


def _read_order(raw: Optional[str]) -> Union[int, str]:
    # unparsable values are passed through so the model falls back with a warning
    if raw is None or raw.strip() == "":
        return DEFAULT_ORDER
    try:
        return int(raw)
    except ValueError:
        return raw


def _read_seed(raw: Optional[str]) -> Optional[int]:
    if raw is None or raw.strip() == "":
        return None
    return int(raw)


ORDER = _read_order(os.environ.get("TEXTCHAIN_ORDER"))
SEED = _read_seed(os.environ.get("TEXTCHAIN_SEED"))
LOG_LEVEL = os.environ.get("TEXTCHAIN_LOG_LEVEL", "INFO").upper()
