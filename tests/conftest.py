import json

import pytest
from fastapi.testclient import TestClient

from quotebook.core.config import settings
from quotebook.models.dto import Quote
from quotebook.services.i18n import Translator

SAMPLE_TRANSLATIONS = {
    "en": {
        "site": {"title": "Quotes"},
        "nav": {"home": "Home", "about": "About"},
        "search": {"placeholder": "Search quotes...", "aria": "Search quotes"},
        "no_quotes_found": "No quotes found",
    },
    "fr": {
        "site": {"title": "Citations"},
        "nav": {"home": "Accueil"},
        "no_quotes_found": "Aucune citation",
    },
}

SAMPLE_QUOTES = {
    "en": [
        {"text": "Be yourself", "author": "Oscar Wilde"},
        {"text": "Love all, trust a few", "author": "William Shakespeare"},
        {"text": "All you need is love", "author": "John Lennon"},
    ],
    "fr": [
        {"text": "Je pense, donc je suis", "author": "René Descartes"},
    ],
}


@pytest.fixture
def translator():
    return Translator(SAMPLE_TRANSLATIONS)


@pytest.fixture
def english_quotes():
    return [Quote(**q) for q in SAMPLE_QUOTES["en"]]


@pytest.fixture
def data_dir(tmp_path):
    """Static sources for the app, written to a temporary directory."""
    (tmp_path / "translations.json").write_text(json.dumps(SAMPLE_TRANSLATIONS), encoding="utf-8")
    (tmp_path / "quotes.json").write_text(json.dumps(SAMPLE_QUOTES), encoding="utf-8")
    common = tmp_path / "common"
    common.mkdir()
    (common / "header.html").write_text(
        '<header><a href="index.html" data-i18n="nav.home">Home</a>'
        '<form method="get"><select id="langSelect" name="lang" data-i18n-aria="language.aria">'
        '<option value="en">English</option><option value="fr">Français</option>'
        "</select></form></header>",
        encoding="utf-8",
    )
    (common / "footer.html").write_text("<footer>footer</footer>", encoding="utf-8")
    return tmp_path


@pytest.fixture
def point_settings_at(monkeypatch):
    """Redirect the static source paths read on startup."""

    def _point(translations, quotes, fragments):
        monkeypatch.setattr(settings, "TRANSLATIONS_PATH", translations)
        monkeypatch.setattr(settings, "QUOTES_PATH", quotes)
        monkeypatch.setattr(settings, "FRAGMENTS_DIR", fragments)

    return _point


@pytest.fixture
def client():
    """Client for the app running on the bundled static sources."""
    from quotebook.main import app

    with TestClient(app) as c:
        yield c


@pytest.fixture
def sample_client(data_dir, point_settings_at):
    """Client for the app running on the sample sources above."""
    from quotebook.main import app

    point_settings_at(data_dir / "translations.json", data_dir / "quotes.json", data_dir / "common")
    with TestClient(app) as c:
        yield c
