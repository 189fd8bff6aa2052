"""
Input/Output Manager (JSON)
Loads word data into a WordSource and forwards history entries to disk.
"""
import json
import logging
import os
from typing import Any, Dict, List, Optional

from wordwheel.model.history import HistoryEntry
from wordwheel.model.words import RankIndex, WordSource
from wordwheel.config import DEFAULT_LANGUAGE

logger = logging.getLogger(__name__)


class IOManager:
    @staticmethod
    def load_word_source(filepath: Optional[str], language: str = DEFAULT_LANGUAGE) -> WordSource:
        """
        Build a WordSource from a JSON word file.

        Expected layout (both keys optional):
            {"languages": {"FR": [...], "EN": [...]},
             "rank_index": {"FR": {"1": {"A": [...]}}}}

        A missing or unreadable file yields an empty WordSource, which then
        serves its built-in fallback list.
        """
        if not filepath or not os.path.exists(filepath):
            logger.warning(f"Word file not found: {filepath}. Using built-in list.")
            return WordSource(language=language)

        logger.info(f"Loading words from: {filepath}")
        try:
            with open(filepath, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Failed to read word file '{filepath}': {e}")
            return WordSource(language=language)

        if not isinstance(data, dict):
            logger.error(f"Word file '{filepath}' has no top-level object.")
            return WordSource(language=language)

        languages = IOManager._parse_languages(data.get("languages"), filepath)
        indexes: Dict[str, RankIndex] = {}
        raw_indexes = data.get("rank_index")
        if isinstance(raw_indexes, dict):
            for lang, raw in raw_indexes.items():
                try:
                    indexes[str(lang)] = IOManager._parse_rank_index(raw)
                except (ValueError, TypeError, AttributeError) as e:
                    # Lookups for this language fall back to scanning the list
                    logger.error(f"Ignoring malformed rank index for '{lang}' in '{filepath}': {e}")
        elif raw_indexes is not None:
            logger.error(f"'rank_index' in '{filepath}' is not an object, ignoring it.")

        logger.debug(
            f"Loaded languages {sorted(languages)}; precomputed indexes for {sorted(indexes)}."
        )
        return WordSource(languages=languages, rank_indexes=indexes, language=language)

    @staticmethod
    def _parse_languages(raw: Any, filepath: str) -> Dict[str, List[str]]:
        if raw is None:
            return {}
        if not isinstance(raw, dict):
            logger.error(f"'languages' in '{filepath}' is not an object, ignoring it.")
            return {}

        languages: Dict[str, List[str]] = {}
        for lang, words in raw.items():
            if not isinstance(words, list):
                logger.error(f"Word list for '{lang}' in '{filepath}' is not a list, ignoring it.")
                continue
            languages[str(lang)] = [str(w).strip().upper() for w in words if str(w).strip()]
        return languages

    @staticmethod
    def _parse_rank_index(raw: Dict[str, Any]) -> RankIndex:
        # JSON keys are strings; ranks are ints
        index: RankIndex = {}
        for rank, letters in raw.items():
            bucket: Dict[str, List[str]] = {}
            for letter, words in letters.items():
                if not isinstance(words, list):
                    raise TypeError(f"bucket {rank}/{letter} is not a list")
                bucket[str(letter)] = [str(w).upper() for w in words]
            index[int(rank)] = bucket
        return index


class JsonLinesHistorySink:
    """Appends each history entry as one JSON line."""
    def __init__(self, filepath: str) -> None:
        self.filepath = filepath

    def __call__(self, entry: HistoryEntry) -> None:
        with open(self.filepath, "a", encoding="utf-8") as f:
            f.write(json.dumps(entry.to_dict(), ensure_ascii=False) + "\n")
        logger.debug(f"History entry forwarded to {self.filepath}: {entry.word}")
