"""Quote filtering and dataset loading."""

import json

import pytest

from quotebook.models.dto import Quote, ViewState
from quotebook.services.quote_service import QuoteService, filter_quotes


def test_empty_keyword_returns_all_in_order(english_quotes):
    assert filter_quotes(english_quotes, "") == english_quotes


def test_blank_keyword_is_treated_as_empty(english_quotes):
    assert filter_quotes(english_quotes, "   ") == english_quotes


@pytest.mark.parametrize("keyword", ["love", "wilde", "zzz", "a"])
def test_refiltering_with_empty_keyword_restores_list(english_quotes, keyword):
    filter_quotes(english_quotes, keyword)
    assert filter_quotes(english_quotes, "") == english_quotes


def test_filter_is_case_insensitive(english_quotes):
    assert filter_quotes(english_quotes, "LOVE") == filter_quotes(english_quotes, "love")


def test_filter_matches_text_and_author_preserving_order(english_quotes):
    result = filter_quotes(english_quotes, "love")
    assert [q.author for q in result] == ["William Shakespeare", "John Lennon"]

    result = filter_quotes(english_quotes, "lennon")
    assert [q.text for q in result] == ["All you need is love"]


def test_filter_trims_keyword(english_quotes):
    assert filter_quotes(english_quotes, "  wilde ") == [english_quotes[0]]


def test_example_dataset():
    quotes = [Quote(text="Be yourself", author="Oscar Wilde")]
    assert filter_quotes(quotes, "wilde") == quotes
    assert filter_quotes(quotes, "xyz") == []


def test_filter_returns_new_list(english_quotes):
    result = filter_quotes(english_quotes, "")
    assert result is not english_quotes


def test_service_search_uses_view_state(english_quotes):
    service = QuoteService({"en": english_quotes})

    assert service.search(ViewState(lang="en", keyword="Wilde")) == [english_quotes[0]]
    assert service.search(ViewState(lang="en")) == english_quotes


def test_service_unknown_language_is_empty(english_quotes):
    service = QuoteService({"en": english_quotes})

    assert service.quotes_for("de") == []
    assert service.search(ViewState(lang="de", keyword="love")) == []


def test_service_counts(english_quotes):
    service = QuoteService({"en": english_quotes, "fr": english_quotes[:1]})

    assert service.total() == 4
    assert service.languages() == ["en", "fr"]


def test_from_file_loads_dataset(data_dir):
    service = QuoteService.from_file(data_dir / "quotes.json")

    assert service.languages() == ["en", "fr"]
    assert service.quotes_for("fr")[0].author == "René Descartes"


def test_from_file_missing_file_gives_empty_dataset(tmp_path):
    service = QuoteService.from_file(tmp_path / "missing.json")
    assert service.total() == 0


def test_from_file_malformed_json_gives_empty_dataset(tmp_path):
    path = tmp_path / "quotes.json"
    path.write_text("[{", encoding="utf-8")

    assert QuoteService.from_file(path).total() == 0


def test_from_file_invalid_schema_gives_empty_dataset(tmp_path):
    path = tmp_path / "quotes.json"
    path.write_text(json.dumps({"en": [{"text": "No author"}]}), encoding="utf-8")

    assert QuoteService.from_file(path).total() == 0


def test_from_file_undecodable_bytes_gives_empty_dataset(tmp_path):
    path = tmp_path / "quotes.json"
    path.write_bytes(b'{"en": [{"text": "\xff", "author": "x"}]}')

    assert QuoteService.from_file(path).total() == 0
