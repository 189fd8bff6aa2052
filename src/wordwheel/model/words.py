"""
Word Source
===========
Language-aware word lists plus the rank -> letter -> words index used by
VRTX mode.

Lookups are total: `lookup()` always returns at least one word, falling back
to a synthetic placeholder when nothing in the active language matches.
"""
from __future__ import annotations

import logging
from typing import Dict, List, Mapping, Optional, Sequence

from wordwheel.config import DEFAULT_LANGUAGE, LANGUAGES, MAX_PARAMETER

logger = logging.getLogger(__name__)

# Used when the primary word data is missing or empty
FALLBACK_WORDS: List[str] = [
    "SOLEIL", "MAISON", "JARDIN", "OCEAN", "MONTAGNE", "FORET", "RIVIERE",
    "ETOILE", "NUAGE", "LUMIERE", "CHEMIN", "VOYAGE", "MIROIR", "SECRET",
    "PIANO", "ORANGE", "TIGRE", "DRAGON", "CASTLE", "GOLD", "AGREE", "SOLID",
]

# EN lists missing from the data are derived from FR with this prefix
DERIVED_PREFIX = "THE "

RankIndex = Dict[int, Dict[str, List[str]]]


def placeholder_word(letter: str) -> str:
    """Deterministic stand-in word embedding `letter`."""
    return f"X{letter}X"


def build_rank_index(words: Sequence[str], max_rank: int = MAX_PARAMETER) -> RankIndex:
    """
    Precompute rank -> letter -> words for ranks 1..max_rank.

    Word order inside each bucket follows the input order.
    """
    index: RankIndex = {rank: {} for rank in range(1, max_rank + 1)}
    for word in words:
        for rank in range(1, min(len(word), max_rank) + 1):
            letter = word[rank - 1]
            index[rank].setdefault(letter, []).append(word)
    return index


class WordSource:
    """
    Holds the word lists of every language and answers VRTX lookups
    against the active one.
    """
    def __init__(
        self,
        languages: Optional[Mapping[str, Sequence[str]]] = None,
        rank_indexes: Optional[Mapping[str, RankIndex]] = None,
        language: str = DEFAULT_LANGUAGE,
    ) -> None:
        self._lists: Dict[str, List[str]] = {
            lang: [w for w in words if w]
            for lang, words in (languages or {}).items()
        }
        self._indexes: Dict[str, RankIndex] = dict(rank_indexes or {})
        self._language = language

    # --- LANGUAGE SELECTOR ---

    @property
    def language(self) -> str:
        return self._language

    def set_language(self, language: str) -> None:
        if language != self._language:
            logger.info(f"Word language switched: {self._language} -> {language}")
        self._language = language

    def toggle_language(self) -> str:
        """Cycle to the next known language and return it."""
        current = LANGUAGES.index(self._language) if self._language in LANGUAGES else -1
        self.set_language(LANGUAGES[(current + 1) % len(LANGUAGES)])
        return self._language

    # --- WORD LISTS ---

    def words(self, language: Optional[str] = None) -> List[str]:
        """Word list for `language` (default: active language). Never empty."""
        lang = language or self._language
        words = self._lists.get(lang)
        if words:
            return words

        if lang != DEFAULT_LANGUAGE:
            base = self._lists.get(DEFAULT_LANGUAGE)
            if base:
                logger.debug(f"No '{lang}' list, deriving it from '{DEFAULT_LANGUAGE}'.")
                derived = [DERIVED_PREFIX + w for w in base]
                self._lists[lang] = derived
                return derived

        logger.warning(f"No word data for '{lang}', using built-in fallback list.")
        return list(FALLBACK_WORDS)

    # --- VRTX LOOKUP ---

    def lookup(self, rank: int, letter: str, exclude: Optional[str] = None) -> List[str]:
        """
        Words of the active language having `letter` at 1-based position `rank`.

        `exclude` is dropped from the result unless it is the only match.
        When nothing matches, a single placeholder word is returned.
        """
        index = self._indexes.get(self._language)
        if index is not None and rank in index:
            candidates = list(index[rank].get(letter, []))
        else:
            candidates = [
                w for w in self.words()
                if len(w) >= rank and w[rank - 1] == letter
            ]

        if not candidates:
            logger.debug(f"No word with '{letter}' at rank {rank}, using placeholder.")
            return [placeholder_word(letter)]

        filtered = [w for w in candidates if w != exclude]
        return filtered or candidates
