# quotebook/services/quote_service.py
# In-memory quotes dataset, loaded once on startup, and keyword filtering over it.

import json
from pathlib import Path
from typing import Dict, List, Optional, Sequence

import structlog
from pydantic import ValidationError

from quotebook.models.dto import Quote, QuotesDataset, ViewState

logger = structlog.get_logger(__name__)


def filter_quotes(quotes: Sequence[Quote], keyword: str) -> List[Quote]:
    """Return the quotes whose text or author contains ``keyword``.

    Matching is a case-insensitive substring test. A blank keyword returns
    every quote. Relative order is always preserved.
    """
    needle = keyword.strip().casefold()
    if not needle:
        return list(quotes)
    return [
        q for q in quotes
        if needle in q.text.casefold() or needle in q.author.casefold()
    ]


class QuoteService:
    """Service layer for the quotes dataset.

    - Loads `quotes.json` into memory on startup.
    - Provides `search` to filter the current language's quotes.
    """

    def __init__(self, dataset: Optional[Dict[str, List[Quote]]] = None):
        self.dataset: Dict[str, List[Quote]] = dataset or {}

    @classmethod
    def from_file(cls, path: Path) -> "QuoteService":
        """Load and validate the dataset; any failure leaves it empty."""
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
            dataset = QuotesDataset.model_validate(data).root
        except FileNotFoundError:
            logger.error("quotes_load_failed", path=str(path), error="file not found")
            return cls()
        except (OSError, UnicodeDecodeError, json.JSONDecodeError, ValidationError) as e:
            logger.error("quotes_load_failed", path=str(path), error=str(e))
            return cls()

        service = cls(dataset)
        logger.info(
            "quotes_loaded",
            path=str(path),
            languages=sorted(dataset),
            total=service.total(),
        )
        return service

    def languages(self) -> List[str]:
        return sorted(self.dataset)

    def total(self) -> int:
        return sum(len(quotes) for quotes in self.dataset.values())

    def quotes_for(self, lang: str) -> List[Quote]:
        return self.dataset.get(lang, [])

    def search(self, view_state: ViewState) -> List[Quote]:
        return filter_quotes(self.quotes_for(view_state.lang), view_state.keyword)
