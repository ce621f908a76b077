import os
import sys
import threading

import pytest
import requests

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app import create_app
from cocktail_api import CocktailDBClient

BASE_URL = "https://www.thecocktaildb.com/api/json/v1/1/"


class FakeResponse:
    def __init__(self, status_code=200, payload=None, text=None):
        self.status_code = status_code
        self._payload = payload
        self._text = text

    @property
    def ok(self):
        return 200 <= self.status_code < 400

    def json(self):
        if self._text is not None:
            raise ValueError("No JSON object could be decoded")
        return self._payload


class FakeSession:
    """Stands in for requests.Session: canned responses keyed by full URL."""

    def __init__(self):
        self.responses = {}
        self.errors = {}
        self.gates = {}
        self.calls = []

    def add(self, url, payload=None, status_code=200, text=None):
        self.responses[BASE_URL + url] = FakeResponse(status_code, payload, text)

    def fail(self, url, exc):
        self.errors[BASE_URL + url] = exc

    def gate(self, url):
        event = threading.Event()
        self.gates[BASE_URL + url] = event
        return event

    def get(self, url, timeout=None):
        self.calls.append(url)
        gate = self.gates.get(url)
        if gate is not None:
            gate.wait(timeout=5)
        if url in self.errors:
            raise self.errors[url]
        return self.responses.get(url, FakeResponse(200, {"drinks": None}))


def make_drink(drink_id="11007", name="Margarita", **fields):
    drink = {
        "idDrink": drink_id,
        "strDrink": name,
        "strCategory": "Ordinary Drink",
        "strAlcoholic": "Alcoholic",
        "strGlass": "Cocktail glass",
        "strInstructions": "Shake with ice and strain.",
        "strDrinkThumb": f"https://www.thecocktaildb.com/images/media/drink/{drink_id}.jpg",
        "strIngredient1": "Tequila",
        "strMeasure1": "1 1/2 oz ",
        "strIngredient2": "Triple sec",
        "strMeasure2": "1/2 oz ",
        "strIngredient3": "Lime juice",
        "strMeasure3": None,
    }
    for i in range(4, 16):
        drink[f"strIngredient{i}"] = None
        drink[f"strMeasure{i}"] = None
    drink.update(fields)
    return drink


@pytest.fixture()
def session():
    return FakeSession()


@pytest.fixture()
def api(session):
    return CocktailDBClient(base_url=BASE_URL, timeout=1, session=session)


@pytest.fixture()
def client(api):
    from fastapi.testclient import TestClient

    app = create_app(client=api)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def network_error():
    return requests.ConnectionError("connection refused")
