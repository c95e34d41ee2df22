"""
Markup Utilities

BeautifulSoup helpers that rewrite rendered HTML in place of client-side
DOM updates.
"""

from typing import Mapping

from bs4 import BeautifulSoup

from quotebook.services.i18n import Translator

# Marker attribute -> attribute it rewrites (None means text content)
I18N_MARKERS = {
    "data-i18n": None,
    "data-i18n-placeholder": "placeholder",
    "data-i18n-aria": "aria-label",
}


def apply_translations(html: str, translator: Translator, lang: str) -> str:
    """
    Replace text content, placeholders and aria-labels of every element
    carrying a translation-key marker.

    Args:
        html: Rendered page or fragment markup
        translator: Lookup used for every key
        lang: Language to translate into

    Returns:
        The rewritten markup
    """
    soup = BeautifulSoup(html, "html.parser")

    for marker, target in I18N_MARKERS.items():
        for el in soup.select(f"[{marker}]"):
            text = translator.translate(el[marker], lang)
            if target is None:
                el.string = text
            else:
                el[target] = text

    return str(soup)


def select_option(html: str, select_id: str, value: str) -> str:
    """Mark the option of ``#select_id`` whose value is ``value`` as selected."""
    soup = BeautifulSoup(html, "html.parser")
    select = soup.find("select", id=select_id)
    if select is None:
        return html

    for option in select.find_all("option"):
        if option.get("value") == value:
            option["selected"] = "selected"
        elif option.has_attr("selected"):
            del option["selected"]

    return str(soup)


def rewrite_links(html: str, hrefs: Mapping[str, str]) -> str:
    """Point links tagged ``data-i18n="<key>"`` at ``hrefs[key]``."""
    soup = BeautifulSoup(html, "html.parser")
    for key, href in hrefs.items():
        for link in soup.select("a[data-i18n]"):
            if link["data-i18n"] == key:
                link["href"] = href
    return str(soup)
