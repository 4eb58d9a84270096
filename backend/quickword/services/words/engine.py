"""Round derivation: round key -> FNV-1a hash -> word + scramble.

Every independent caller that agrees on (interval, round start) and holds
the same catalog computes the same result, so no server round-trip is
needed to agree on a round's word. Python ints do not wrap, so every
32-bit step is masked explicitly.

Nothing here is secret: anyone who knows the algorithm can compute the
answer. The guarantee is agreement, not unpredictability.
"""

import math
import operator
from typing import List, NamedTuple, Sequence, TypeVar, Union

from .catalog import DEFAULT_CATALOG, InvalidCatalogError, WordCatalog

T = TypeVar('T')

UINT32_MASK = 0xFFFFFFFF
TWO_POW_32 = 4294967296

FNV32_OFFSET_BASIS = 0x811C9DC5
FNV32_PRIME = 16777619

# xorshift32 never leaves state 0, which would leave every word unshuffled
ZERO_SEED_SUBSTITUTE = 0x9E3779B9


class RoundWord(NamedTuple):
    word: str
    scrambled: str

    def to_dict(self) -> dict:
        return {'word': self.word, 'scrambled': self.scrambled}


def _as_int(value, name: str) -> int:
    if isinstance(value, bool):
        raise TypeError(f"{name} must be an integer, got bool")
    try:
        return operator.index(value)
    except TypeError:
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}") from None


def round_key(interval_minutes: int, round_start_ms: int) -> str:
    """Canonical `"<interval>:<start>"` key, always plain base 10.

    Floats are refused: `1.7e12` and `1700000000000` must never render as
    two different keys on two machines.
    """
    interval = _as_int(interval_minutes, 'interval_minutes')
    start = _as_int(round_start_ms, 'round_start_ms')
    return f"{interval:d}:{start:d}"


def fnv1a_32(data: Union[str, bytes]) -> int:
    """32-bit FNV-1a over the UTF-8 bytes of `data`."""
    if isinstance(data, str):
        data = data.encode('utf-8')
    h = FNV32_OFFSET_BASIS
    for b in data:
        h ^= b
        h = (h * FNV32_PRIME) & UINT32_MASK
    return h


def _to_int32(x: int) -> int:
    return x - TWO_POW_32 if x & 0x80000000 else x


class Xorshift32:
    """xorshift32 (13, 17, 5) drawing floats in [0, 1).

    The 17-bit right shift is arithmetic on the state read as a signed
    32-bit value, which is what the browser client computes. A logical
    shift gives a different sequence as soon as the top bit is set.
    """

    __slots__ = ('state',)

    def __init__(self, seed: int):
        state = _as_int(seed, 'seed') & UINT32_MASK
        self.state = state or ZERO_SEED_SUBSTITUTE

    def next_uint32(self) -> int:
        x = self.state
        x ^= (x << 13) & UINT32_MASK
        x ^= (_to_int32(x) >> 17) & UINT32_MASK
        x ^= (x << 5) & UINT32_MASK
        self.state = x
        return x

    def random(self) -> float:
        return self.next_uint32() / TWO_POW_32


def shuffle_with_seed(items: Sequence[T], seed: int) -> List[T]:
    """Fisher-Yates driven by Xorshift32(seed). Returns a new list."""
    out = list(items)
    rng = Xorshift32(seed)
    for i in range(len(out) - 1, 0, -1):
        j = math.floor(rng.random() * (i + 1))
        out[i], out[j] = out[j], out[i]
    return out


def scramble_word(word: str, seed: int) -> str:
    """Deterministically scramble `word`.

    Words of three characters or fewer are reversed. Longer words are
    shuffled; a shuffle that comes back unchanged gets its first two
    characters swapped, which still leaves words starting with a doubled
    letter (e.g. "aabc") unchanged in that case.
    """
    if len(word) <= 3:
        return word[::-1]
    scrambled = ''.join(shuffle_with_seed(word, seed))
    if scrambled == word:
        scrambled = word[1] + word[0] + word[2:]
    return scrambled


def select_index(catalog: WordCatalog, hash_value: int) -> int:
    size = catalog.size()
    if size == 0:
        raise InvalidCatalogError("word catalog is empty")
    return (hash_value & UINT32_MASK) % size


def select_word(catalog: WordCatalog, hash_value: int) -> str:
    return catalog.word_at(select_index(catalog, hash_value))


def get_round_word(round_start_ms: int, interval_minutes: int,
                   catalog: WordCatalog = DEFAULT_CATALOG) -> RoundWord:
    """Word and scramble for the round starting at `round_start_ms`.

    Pure: the same arguments always give the same result. Zero or negative
    intervals are caller misuse and are not rejected here.
    """
    h = fnv1a_32(round_key(interval_minutes, round_start_ms))
    word = select_word(catalog, h)
    return RoundWord(word, scramble_word(word, h))


class RoundWordEngine:
    """Binds a catalog, loaded once at startup, to the derivation functions."""

    def __init__(self, catalog: WordCatalog = DEFAULT_CATALOG):
        self._catalog = catalog

    @property
    def catalog(self) -> WordCatalog:
        return self._catalog

    def derive(self, round_start_ms: int, interval_minutes: int) -> RoundWord:
        return get_round_word(round_start_ms, interval_minutes, self._catalog)
