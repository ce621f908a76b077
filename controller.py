import logging
from typing import Any, Callable, Optional

from starlette.concurrency import run_in_threadpool

import messages
from cocktail_api import CocktailAPIError, CocktailDBClient
from display_state import CATEGORIES, DETAIL, DisplayState, Error, Found, Loading, NotFound, RegionState
from messages import CATEGORIES_NOT_FOUND, COCKTAIL_NOT_FOUND, EMPTY_SEARCH

logger = logging.getLogger(__name__)


def cocktail_result(drink) -> RegionState:
    return Found(drink) if drink is not None else NotFound(COCKTAIL_NOT_FOUND)


class CocktailController:
    """Runs the user flows: loading state, fetch, then the final state.

    Every flow returns True when its outcome is what the region now shows,
    False when a later flow on the same region superseded it.
    """

    def __init__(self, client: CocktailDBClient, state: Optional[DisplayState] = None):
        self.client = client
        self.state = state or DisplayState()

    async def _run(
        self,
        region: str,
        loading_message: str,
        fetch: Callable[[], Any],
        to_state: Callable[[Any], RegionState],
        error_prefix: str,
    ) -> bool:
        ticket = self.state.begin(region, Loading(loading_message))
        try:
            result = await run_in_threadpool(fetch)
        except CocktailAPIError as e:
            logger.exception("Cocktail fetch error: %s", error_prefix)
            return self.state.resolve(region, ticket, Error(f"{error_prefix}: {e.message}"))
        current = self.state.resolve(region, ticket, to_state(result))
        if not current:
            logger.info("Dropped stale %s result (ticket %s)", region, ticket)
        return current

    async def search(self, term: str) -> bool:
        term = (term or "").strip()
        if not term:
            self.state.begin(DETAIL, Error(EMPTY_SEARCH))
            return True
        return await self._run(
            DETAIL,
            messages.search_loading(term),
            lambda: self.client.search_by_name(term),
            cocktail_result,
            "Error al buscar cóctel",
        )

    async def random(self) -> bool:
        return await self._run(
            DETAIL,
            messages.RANDOM_LOADING,
            self.client.random_cocktail,
            cocktail_result,
            "Error al cargar cóctel aleatorio",
        )

    async def browse_category(self, category: str) -> bool:
        # the Loading state replaces whatever the detail region showed
        not_found = NotFound(messages.category_empty(category))
        return await self._run(
            DETAIL,
            messages.category_loading(category),
            lambda: self.client.fetch_cocktails_by_category(category),
            lambda drinks: Found(drinks) if drinks else not_found,
            messages.category_error(category),
        )

    async def show_details(self, drink_id: str) -> bool:
        return await self._run(
            DETAIL,
            messages.DETAIL_LOADING,
            lambda: self.client.lookup_by_id(drink_id),
            cocktail_result,
            "Error al cargar detalles del cóctel",
        )

    async def load_categories(self) -> bool:
        ticket = self.state.begin(CATEGORIES, Loading(messages.CATEGORIES_LOADING))
        try:
            categories = await run_in_threadpool(self.client.fetch_category_list)
        except CocktailAPIError as e:
            logger.exception("Category fetch error")
            self.state.begin(DETAIL, Error(f"Error al cargar las categorías: {e.message}"))
            categories = None
        if not categories:
            return self.state.resolve(CATEGORIES, ticket, NotFound(CATEGORIES_NOT_FOUND))
        return self.state.resolve(CATEGORIES, ticket, Found(categories))
