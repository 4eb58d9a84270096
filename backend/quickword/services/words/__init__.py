"""Word services: the catalog and the round derivation engine.

Everything here is pure: no clock reads, no I/O beyond loading a catalog
file, no shared mutable state. Any two callers holding the same catalog
derive the same word and scramble for the same round.
"""

from .catalog import DEFAULT_CATALOG, DEFAULT_WORDS, InvalidCatalogError, WordCatalog
from .engine import RoundWord, RoundWordEngine, get_round_word

__all__ = [
    'DEFAULT_CATALOG',
    'DEFAULT_WORDS',
    'InvalidCatalogError',
    'RoundWord',
    'RoundWordEngine',
    'WordCatalog',
    'get_round_word',
]
