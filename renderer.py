"""Pure rendering functions: cocktail records -> HTML fragments.

Every function here takes plain data (models or ``None``) and returns a
string of markup. No I/O, no state. Absent and empty inputs render their
"not found" message instead of raising.
"""
from pathlib import Path
from typing import Any, Optional, Sequence

import jinja2
from markupsafe import Markup

import messages
from display_state import Error, Found, Loading, NotFound, RegionState
from messages import CATEGORIES_NOT_FOUND, COCKTAIL_NOT_FOUND, COCKTAILS_NOT_FOUND, DEFAULT_LOADING
from models import Category, Cocktail, CocktailSummary

_TEMPLATE_DIR = Path(__file__).resolve().parent / "templates"
_jinja_env = jinja2.Environment(
    loader=jinja2.FileSystemLoader(str(_TEMPLATE_DIR)),
    autoescape=True,
    trim_blocks=True,
    lstrip_blocks=True,
)


def render_template(template_name: str, **kwargs: Any) -> str:
    return _jinja_env.get_template(template_name).render(**kwargs)


def render_loading(message: str = DEFAULT_LOADING) -> str:
    return render_template("status.html", css_class="loading-text", message=message)


def render_error(message: str) -> str:
    return render_template("status.html", css_class="error-text", message=message)


def render_cocktail_detail(drink: Optional[Cocktail]) -> str:
    if drink is None:
        return render_error(COCKTAIL_NOT_FOUND)
    return render_template("cocktail_detail.html", drink=drink)


def render_category_cards(categories: Optional[Sequence[Category]]) -> str:
    if not categories:
        return render_error(CATEGORIES_NOT_FOUND)
    return render_template(
        "category_cards.html", categories=categories, loading=messages.category_loading
    )


def render_cocktail_grid(drinks: Optional[Sequence[CocktailSummary]]) -> str:
    if not drinks:
        return render_error(COCKTAILS_NOT_FOUND)
    return render_template("cocktail_grid.html", drinks=drinks, loading=messages.DETAIL_LOADING)


def render_region(state: RegionState) -> str:
    """Render whatever a display region currently holds."""
    if isinstance(state, Loading):
        return render_loading(state.message)
    if isinstance(state, Error):
        return render_error(state.message)
    if isinstance(state, NotFound):
        return render_error(state.message)
    if isinstance(state, Found):
        value = state.value
        if isinstance(value, Cocktail):
            return render_cocktail_detail(value)
        if value and isinstance(value[0], Category):
            return render_category_cards(value)
        if value and isinstance(value[0], CocktailSummary):
            return render_cocktail_grid(value)
    # Empty, or a Found with nothing in it
    return ""


def render_page(
    categories_html: str, detail_html: str = "", viewer_id: str = "", static_url: str = "/static"
) -> str:
    return render_template(
        "page.html",
        categories_html=Markup(categories_html),
        detail_html=Markup(detail_html),
        viewer_id=viewer_id,
        search_loading=messages.SEARCH_LOADING,
        random_loading=messages.RANDOM_LOADING,
        static_url=static_url,
    )
