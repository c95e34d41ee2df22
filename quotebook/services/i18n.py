# Key-based text lookup over the translation table loaded from translations.json.

import json
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Tuple

import structlog

logger = structlog.get_logger(__name__)

TranslationTable = Dict[str, Dict[str, Any]]


class Translator:
    """Resolve display strings for translation keys.

    A key that cannot be resolved is returned unchanged, so untranslated
    markup shows the key rather than failing.
    """

    def __init__(self, translations: Optional[Mapping[str, Mapping[str, Any]]] = None):
        self._translations: TranslationTable = {
            lang: dict(mapping) for lang, mapping in (translations or {}).items()
        }

    @classmethod
    def from_file(cls, path: Path) -> "Translator":
        """Load the translation table, falling back to an empty one on any error."""
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            logger.error("translations_load_failed", path=str(path), error="file not found")
            return cls()
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            logger.error("translations_load_failed", path=str(path), error=str(e))
            return cls()

        if not isinstance(data, dict):
            logger.error("translations_load_failed", path=str(path), error="top level is not an object")
            return cls()

        table = {lang: mapping for lang, mapping in data.items() if isinstance(mapping, dict)}
        skipped = sorted(set(data) - set(table))
        if skipped:
            logger.warning("translations_languages_skipped", path=str(path), languages=skipped)
        logger.info("translations_loaded", path=str(path), languages=sorted(table))
        return cls(table)

    def languages(self) -> Tuple[str, ...]:
        return tuple(sorted(self._translations))

    def has_language(self, lang: str) -> bool:
        return lang in self._translations

    def table_for(self, lang: str) -> Dict[str, Any]:
        return self._translations.get(lang, {})

    def lookup(self, key: str, lang: str) -> str:
        """Flat lookup: the value stored under ``key`` itself, else ``key``."""
        value = self._translations.get(lang, {}).get(key)
        if isinstance(value, str) and value:
            return value
        return key

    def lookup_nested(self, key: str, lang: str, sep: str = ".") -> str:
        """Walk ``key`` one ``sep``-separated segment per level, else ``key``."""
        value: Any = self._translations.get(lang)
        for part in key.split(sep):
            if isinstance(value, dict) and part in value:
                value = value[part]
            else:
                return key
        return value if isinstance(value, str) else key

    def translate(self, key: str, lang: str) -> str:
        value = self.lookup(key, lang)
        if value != key:
            return value
        return self.lookup_nested(key, lang)

    def missing_keys(self, reference_lang: str) -> Dict[str, List[str]]:
        """Dotted keys of ``reference_lang`` that each other language lacks."""
        reference = _flatten(self.table_for(reference_lang))
        missing: Dict[str, List[str]] = {}
        for lang in self.languages():
            if lang == reference_lang:
                continue
            present = _flatten(self.table_for(lang))
            missing[lang] = sorted(k for k in reference if k not in present)
        return missing


def _flatten(mapping: Mapping[str, Any], prefix: str = "") -> Dict[str, str]:
    flat: Dict[str, str] = {}
    for key, value in mapping.items():
        dotted = f"{prefix}{key}"
        if isinstance(value, dict):
            flat.update(_flatten(value, f"{dotted}."))
        elif isinstance(value, str):
            flat[dotted] = value
    return flat
