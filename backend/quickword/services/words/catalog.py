from typing import Iterable, Iterator, Tuple


class InvalidCatalogError(ValueError):
    """Raised when a word is requested from a catalog with no entries."""


# Order matters: a word's index is part of the cross-client contract.
DEFAULT_WORDS: Tuple[str, ...] = (
    "bird", "house", "money", "planet", "window", "coffee", "travel", "purple", "yellow", "bridge",
    "tomorrow", "picture", "button", "memory", "shadow", "forest", "castle", "winter", "summer", "school",
    "rocket", "camera", "guitar", "circle", "triangle", "pencil", "bottle", "market", "random", "silver",
    "street", "garden", "animal", "orange", "future", "simple", "danger", "secret", "energy", "friend",
    "light", "night", "storm", "ocean", "river", "mountain", "minute", "second", "quick", "focus",
)


class WordCatalog:
    """Fixed, ordered vocabulary.

    The catalog does no index wrapping; reducing a hash into range is the
    engine's job. Duplicates are allowed.
    """

    __slots__ = ('_words',)

    def __init__(self, words: Iterable[str]):
        entries = tuple(words)
        for word in entries:
            if not isinstance(word, str):
                raise TypeError(f"catalog entries must be str, got {type(word).__name__}")
        self._words: Tuple[str, ...] = entries

    @classmethod
    def from_file(cls, path) -> 'WordCatalog':
        """Load one word per line. Blank lines and `#` comments are skipped."""
        words = []
        with open(path, encoding='utf-8') as fh:
            for line in fh:
                word = line.strip()
                if not word or word.startswith('#'):
                    continue
                words.append(word)
        return cls(words)

    def word_at(self, index: int) -> str:
        if index < 0:
            raise IndexError(f"catalog index must be non-negative, got {index}")
        return self._words[index]

    def size(self) -> int:
        return len(self._words)

    @property
    def words(self) -> Tuple[str, ...]:
        return self._words

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __contains__(self, word) -> bool:
        return word in self._words

    def __eq__(self, other) -> bool:
        if not isinstance(other, WordCatalog):
            return NotImplemented
        return self._words == other._words

    def __hash__(self) -> int:
        return hash(self._words)

    def __repr__(self) -> str:
        return f"WordCatalog(size={len(self._words)})"


DEFAULT_CATALOG = WordCatalog(DEFAULT_WORDS)
