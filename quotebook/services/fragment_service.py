# Shared header/footer markup, read once on startup and injected into every page.

from pathlib import Path
from typing import Dict, Optional

import structlog

from quotebook.core.config import settings
from quotebook.models.dto import ViewState
from quotebook.utils.markup import rewrite_links, select_option

logger = structlog.get_logger(__name__)

LANG_SELECT_ID = "langSelect"


def _read_fragment(path: Path) -> str:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    except FileNotFoundError:
        logger.error("fragment_load_failed", path=str(path), error="file not found")
    except (OSError, UnicodeDecodeError) as e:
        logger.error("fragment_load_failed", path=str(path), error=str(e))
    return ""


class FragmentService:
    def __init__(self, header: str = "", footer: str = "", nav_links: Optional[Dict[str, str]] = None):
        self._header = header
        self._footer = footer
        self.nav_links = nav_links if nav_links is not None else {
            "nav.home": settings.HOME_URL,
            "nav.about": settings.ABOUT_URL,
            "nav.sponsors": settings.SPONSORS_URL,
        }

    @classmethod
    def from_directory(cls, directory: Path) -> "FragmentService":
        header = _read_fragment(directory / "header.html")
        footer = _read_fragment(directory / "footer.html")
        logger.info(
            "fragments_loaded",
            directory=str(directory),
            header=bool(header),
            footer=bool(footer),
        )
        return cls(header=header, footer=footer)

    def header_for(self, view_state: ViewState, fix_nav_links: bool = False) -> str:
        """Header markup with the current language selected."""
        if not self._header:
            return ""
        html = select_option(self._header, LANG_SELECT_ID, view_state.lang)
        if fix_nav_links:
            html = rewrite_links(html, self.nav_links)
        return html

    def footer(self) -> str:
        return self._footer
