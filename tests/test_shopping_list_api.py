"""Tests for the shopping list and ingredient API endpoints."""

from datetime import date

import pytest
from fastapi.testclient import TestClient

from littlecook.main import app
from littlecook.plan.occurrences import select_occurrences
from littlecook.repository import get_meal_plan_repository


class FakeMealPlanRepository:
    """In-memory stand-in for MealPlanRepository."""

    def __init__(self, occurrences=None, error=None):
        self.occurrences = occurrences or []
        self.error = error
        self.queries = []

    async def fetch_for_query(self, query):
        self.queries.append(query)
        if self.error is not None:
            raise self.error
        return select_occurrences(self.occurrences, query)


@pytest.fixture
def week_of_meals(carbonara, omelette, make_occurrence):
    return [
        make_occurrence(carbonara, people=("alice", "bob"), cook="alice", cook_name="Alice"),
        make_occurrence(omelette, people=("bob",), day_offset=2, cook="bob", cook_name="Bob"),
    ]


@pytest.fixture
def repository(week_of_meals):
    return FakeMealPlanRepository(week_of_meals)


@pytest.fixture
def client(repository):
    app.dependency_overrides[get_meal_plan_repository] = lambda: repository
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()


WEEK = {"preset": "custom", "start_date": "2025-03-03"}


# =============================================================================
# Shopping List Endpoint Tests
# =============================================================================


class TestGenerateShoppingList:
    """Tests for POST /api/v1/shopping-list."""

    def test_generates_scaled_list(self, client):
        response = client.post("/api/v1/shopping-list", json={**WEEK, "meal_user_ids": ["alice"]})
        assert response.status_code == 200

        data = response.json()
        assert data["start_date"] == "2025-03-03"
        assert data["end_date"] == "2025-03-09"

        lardons = next(i for i in data["items"] if i["ingredient"]["name"] == "lardons")
        assert lardons["total_quantity"] == 100.0
        assert lardons["display_quantity"] == "100"
        assert lardons["recipes"] == ["Pâtes carbonara"]

        assert list(data["items_by_category"]) == [
            "Autres",
            "céréales",
            "produits laitiers",
            "viandes",
        ]
        assert list(data["recipes_by_meal"]) == ["Lundi 3 mars - Dîner"]
        assert data["unique_recipes"] == [{"id": "recipe-carbonara", "title": "Pâtes carbonara"}]

    def test_textual_quantities_are_strings(self, client):
        response = client.post("/api/v1/shopping-list", json={**WEEK, "meal_user_ids": ["bob"]})
        salt = next(i for i in response.json()["items"] if i["ingredient"]["name"] == "sel")

        assert salt["total_quantity"] == "une pincée"

    def test_empty_profiles_do_not_hit_storage(self, client, repository):
        response = client.post("/api/v1/shopping-list", json={**WEEK, "meal_user_ids": []})

        assert response.status_code == 200
        assert response.json()["items"] == []
        assert repository.queries == []

    def test_cook_filter(self, client):
        response = client.post(
            "/api/v1/shopping-list",
            json={**WEEK, "meal_user_ids": ["alice", "bob"], "cook_responsible_id": "bob"},
        )
        names = {i["ingredient"]["name"] for i in response.json()["items"]}

        assert names == {"oeufs", "sel"}

    def test_inverted_dates_are_rejected(self, client):
        response = client.post(
            "/api/v1/shopping-list",
            json={
                "meal_user_ids": ["alice"],
                "preset": "custom",
                "start_date": "2025-03-09",
                "end_date": "2025-03-03",
            },
        )
        assert response.status_code == 400

    def test_dates_without_preset_are_honoured(self, client, repository):
        response = client.post(
            "/api/v1/shopping-list",
            json={"meal_user_ids": ["alice"], "start_date": "2020-01-06", "end_date": "2020-01-12"},
        )
        assert response.status_code == 200

        data = response.json()
        assert (data["start_date"], data["end_date"]) == ("2020-01-06", "2020-01-12")
        assert repository.queries[0].date_range == (date(2020, 1, 6), date(2020, 1, 12))

    def test_end_date_without_start_is_rejected(self, client, repository):
        for body in ({"preset": "custom", "end_date": "2025-03-09"}, {"end_date": "2025-03-09"}):
            response = client.post(
                "/api/v1/shopping-list", json={**body, "meal_user_ids": ["alice"]}
            )
            assert response.status_code == 400

        assert repository.queries == []

    def test_invalid_body(self, client):
        response = client.post("/api/v1/shopping-list", json={"meal_user_ids": "alice"})
        assert response.status_code == 422

    def test_storage_failure_is_a_server_error(self):
        failing = FakeMealPlanRepository(error=RuntimeError("database is down"))
        app.dependency_overrides[get_meal_plan_repository] = lambda: failing
        try:
            client = TestClient(app, raise_server_exceptions=False)
            response = client.post(
                "/api/v1/shopping-list", json={**WEEK, "meal_user_ids": ["alice"]}
            )
        finally:
            app.dependency_overrides.clear()

        assert response.status_code == 500


class TestExportAndShare:
    """Tests for export, share and cooks endpoints."""

    def test_export(self, client):
        response = client.post(
            "/api/v1/shopping-list/export", json={**WEEK, "meal_user_ids": ["alice"]}
        )

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/plain")
        assert "liste-de-courses-2025-03-03.txt" in response.headers["content-disposition"]
        assert response.text.startswith("# Liste de courses - 3 mars - 9 mars 2025\n")
        assert "- lardons: 100 g" in response.text

    def test_export_with_no_profiles(self, client):
        response = client.post("/api/v1/shopping-list/export", json={**WEEK})

        assert response.status_code == 200
        assert response.text == "# Liste de courses - 3 mars - 9 mars 2025\n"

    def test_share(self, client):
        response = client.post(
            "/api/v1/shopping-list/share", json={**WEEK, "meal_user_ids": ["bob"]}
        )
        data = response.json()

        assert data["title"] == "Liste de courses"
        assert "• sel: une pincée " in data["text"]

    def test_cooks_ignore_cook_filter(self, client):
        response = client.post(
            "/api/v1/shopping-list/cooks",
            json={**WEEK, "meal_user_ids": ["alice", "bob"], "cook_responsible_id": "bob"},
        )

        assert response.json() == [{"id": "alice", "name": "Alice"}, {"id": "bob", "name": "Bob"}]


# =============================================================================
# Ingredient Parsing Endpoint Tests
# =============================================================================


def test_parse_ingredients(client):
    response = client.post(
        "/api/v1/ingredients/parse",
        json={"lines": ["2 gousses d'ail, hachées", "", "20 cl de crème"]},
    )
    assert response.status_code == 200

    data = response.json()
    assert data["total"] == 2
    assert data["ingredients"][0] == {
        "quantity": 2.0,
        "unit": "gousse",
        "name": "ail",
        "notes": "hachées",
        "category": "épices",
    }
