import logging
from typing import Dict, List, Optional, Type, TypeVar
from urllib.parse import quote, urlencode

import requests
from pydantic import BaseModel, ValidationError

from config import Settings
from models import Category, Cocktail, CocktailSummary

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


class CocktailAPIError(Exception):
    """Base class for failures talking to TheCocktailDB."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class HttpError(CocktailAPIError):
    def __init__(self, status_code: int):
        super().__init__(f"HTTP error! Status: {status_code}")
        self.status_code = status_code


class NetworkError(CocktailAPIError):
    pass


class ParseError(CocktailAPIError):
    pass


def build_query(query: Optional[Dict[str, str]]) -> str:
    # quote (not quote_plus): spaces become %20 and "/" is escaped too
    if not query:
        return ""
    return "?" + urlencode(query, quote_via=quote, safe="")


class CocktailDBClient:
    def __init__(
        self,
        base_url: str = Settings.COCKTAILDB_BASE_URL,
        timeout: float = Settings.COCKTAILDB_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        self.api_base = base_url if base_url.endswith("/") else base_url + "/"
        self.timeout = timeout
        self.session = session or requests.Session()

    def api_request(self, endpoint: str, query: Optional[Dict[str, str]] = None) -> Optional[list]:
        """GET an endpoint and return its ``drinks`` collection, or None when empty."""
        url = self.api_base + endpoint + build_query(query)
        logger.info("Fetching URL: %s", url)
        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error("Cocktail fetch error for %s: %s", url, e)
            raise NetworkError(f"Network error: {e}") from e

        if not response.ok:
            logger.error("Cocktail fetch error for %s: status %s", url, response.status_code)
            raise HttpError(response.status_code)

        try:
            data = response.json()
        except ValueError as e:
            logger.error("Invalid JSON from %s", url)
            raise ParseError("Invalid JSON in response") from e

        if not isinstance(data, dict):
            raise ParseError("Unexpected response shape")
        drinks = data.get("drinks")
        if not drinks:
            return None
        if not isinstance(drinks, list):
            raise ParseError("Unexpected response shape")
        return drinks

    @staticmethod
    def parse_records(model: Type[T], rows: list) -> List[T]:
        try:
            return [model.model_validate(row) for row in rows]
        except ValidationError as e:
            logger.error("Unexpected %s record: %s", model.__name__, e)
            raise ParseError(f"Unexpected {model.__name__} record") from e

    def fetch_single_cocktail(self, path: str, query: Optional[Dict[str, str]] = None) -> Optional[Cocktail]:
        drinks = self.api_request(path, query)
        if drinks is None:
            return None
        # single-entity endpoints still wrap the result in a list
        return self.parse_records(Cocktail, drinks[:1])[0]

    def fetch_category_list(self) -> Optional[List[Category]]:
        drinks = self.api_request("list.php", {"c": "list"})
        if drinks is None:
            return None
        return self.parse_records(Category, drinks)

    def fetch_cocktails_by_category(self, category: str) -> Optional[List[CocktailSummary]]:
        drinks = self.api_request("filter.php", {"c": category})
        if drinks is None:
            return None
        return self.parse_records(CocktailSummary, drinks)

    def search_by_name(self, name: str) -> Optional[Cocktail]:
        return self.fetch_single_cocktail("search.php", {"s": name})

    def random_cocktail(self) -> Optional[Cocktail]:
        return self.fetch_single_cocktail("random.php")

    def lookup_by_id(self, drink_id: str) -> Optional[Cocktail]:
        return self.fetch_single_cocktail("lookup.php", {"i": drink_id})
