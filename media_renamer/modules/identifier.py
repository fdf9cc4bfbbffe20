import os
import uuid
from typing import Callable

from ..errors import EntropySourceError
from ..settings import ALLOWED_ID_BYTES, ID_BYTES

__all__ = ["generate_identifier"]


def generate_identifier(num_bytes: int = ID_BYTES,
                        urandom: Callable[[int], bytes] = os.urandom) -> str:
    """
    Return a fresh lowercase hex identifier of ``2 * num_bytes`` characters.

    - 16 bytes: version/variant bits are set, i.e. the hex form of a UUIDv4.
    - 8 bytes: plain random hex.
    Failure of the secure source raises EntropySourceError; there is no fallback.
    """
    if num_bytes not in ALLOWED_ID_BYTES:
        raise ValueError(f"num_bytes must be one of {ALLOWED_ID_BYTES}, got {num_bytes}")

    try:
        raw = urandom(num_bytes)
    except (OSError, NotImplementedError) as e:
        raise EntropySourceError(f"secure random source failed: {e}") from e

    if len(raw) != num_bytes:
        raise EntropySourceError(f"secure random source returned {len(raw)} of {num_bytes} bytes")

    if num_bytes == 16:
        return uuid.UUID(bytes=raw, version=4).hex
    return raw.hex()
