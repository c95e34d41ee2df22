# Pure view construction for the quote list, plus the page-level glue that
# turns a view into translated HTML.

from typing import Any, Dict, Optional, Sequence

from jinja2 import Environment

from quotebook.models.dto import Quote, QuoteEntry, QuoteListView, ViewState
from quotebook.services.fragment_service import FragmentService
from quotebook.services.i18n import Translator
from quotebook.utils.markup import apply_translations

NO_QUOTES_KEY = "no_quotes_found"


def render_quote_list(quotes: Sequence[Quote], view_state: ViewState, translator: Translator) -> QuoteListView:
    """Describe the quote list for ``view_state``.

    An empty list becomes a single placeholder row carrying the translated
    "no quotes found" text.
    """
    if not quotes:
        entries = [
            QuoteEntry(text=translator.translate(NO_QUOTES_KEY, view_state.lang), placeholder=True)
        ]
    else:
        entries = [QuoteEntry(text=q.text, author=q.author) for q in quotes]

    return QuoteListView(
        lang=view_state.lang,
        keyword=view_state.keyword,
        total=len(quotes),
        entries=entries,
    )


class PageRenderer:
    """Fill page templates with the shared fragments and translate the result."""

    def __init__(self, env: Environment, translator: Translator, fragments: FragmentService):
        self.env = env
        self.translator = translator
        self.fragments = fragments

    def render_page(
        self,
        template_name: str,
        view_state: ViewState,
        *,
        fix_nav_links: bool = False,
        context: Optional[Dict[str, Any]] = None,
    ) -> str:
        template = self.env.get_template(template_name)
        html = template.render(
            lang=view_state.lang,
            view_state=view_state,
            languages=self.translator.languages(),
            header_html=self.fragments.header_for(view_state, fix_nav_links=fix_nav_links),
            footer_html=self.fragments.footer(),
            **(context or {}),
        )
        return apply_translations(html, self.translator, view_state.lang)

    def render_index(self, view: QuoteListView, view_state: ViewState) -> str:
        return self.render_page("index.html", view_state, fix_nav_links=True, context={"view": view})

    def render_about(self, view_state: ViewState) -> str:
        return self.render_page("about.html", view_state)
