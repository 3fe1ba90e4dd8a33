"""Maps a measured bit pattern back to a record identifier."""
from __future__ import annotations

from typing import Iterable, Sequence, Tuple, Union

from grover_match.errors import NO_MATCH, _NoMatch


def decode(pattern: Sequence[int], encodings: Iterable[Tuple[str, Sequence[int]]]) -> Union[str, _NoMatch]:
    """First identifier whose encoding equals `pattern`, else NO_MATCH."""
    bits = tuple(int(b) for b in pattern)
    for identifier, encoded in encodings:
        if tuple(encoded) == bits:
            return identifier
    return NO_MATCH
