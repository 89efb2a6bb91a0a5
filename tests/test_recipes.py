from unittest import mock

from bson import ObjectId
from pymongo.errors import ServerSelectionTimeoutError

from chef_vibes.services import RecipeService

HIDDEN_FIELDS = ("strYoutube", "strTags", "strInstructions")


def test_list_recipes_hides_heavy_fields(auth_client, recipes):
    response = auth_client.get("/recipies")

    assert response.status_code == 200
    data = response.get_json()
    assert len(data) == 3
    for recipe in data:
        assert "strMeal" in recipe
        for field in HIDDEN_FIELDS:
            assert field not in recipe


def test_get_recipe_returns_all_fields(client, recipes):
    recipe_id = recipes["Beef Wellington"]

    response = client.get(f"/recipies/{recipe_id}")

    assert response.status_code == 200
    data = response.get_json()
    assert data["_id"] == recipe_id
    assert data["strMeal"] == "Beef Wellington"
    for field in HIDDEN_FIELDS:
        assert field in data


def test_get_unknown_recipe_returns_null(client, recipes):
    response = client.get(f"/recipies/{ObjectId()}")

    assert response.status_code == 200
    assert response.get_json() is None


def test_get_recipe_with_malformed_id(client):
    response = client.get("/recipies/not-an-object-id")

    assert response.status_code == 400
    assert response.get_json() == {"success": False, "message": "Invalid id"}


def test_create_recipe_needs_no_auth(client, db):
    response = client.post("/recipie", json={"strMeal": "Pancakes", "strCategory": "Breakfast"})

    assert response.status_code == 200
    data = response.get_json()
    assert data["acknowledged"] is True
    stored = db["recipies"].find_one({"_id": ObjectId(data["insertedId"])})
    assert stored["strMeal"] == "Pancakes"


def test_create_recipe_rejects_client_id(client, db):
    response = client.post("/recipie", json={"_id": "abc", "strMeal": "Pancakes"})

    assert response.status_code == 400
    assert response.get_json()["success"] is False
    assert db["recipies"].count_documents({}) == 0


def test_create_recipe_rejects_operator_keys(client, db):
    response = client.post("/recipie", json={"$where": "1 == 1"})

    assert response.status_code == 400
    assert db["recipies"].count_documents({}) == 0


def test_update_recipe_requires_auth(client, recipes, db):
    recipe_id = recipes["Beef Wellington"]

    response = client.put(f"/recipie/{recipe_id}", json={"strMeal": "Changed"})

    assert response.status_code == 401
    assert db["recipies"].find_one({"_id": ObjectId(recipe_id)})["strMeal"] == "Beef Wellington"


def test_update_recipe_merges_fields(auth_client, recipes, db):
    recipe_id = recipes["Beef Wellington"]

    response = auth_client.put(f"/recipie/{recipe_id}", json={"strTags": "Meat"})

    assert response.status_code == 200
    data = response.get_json()
    assert data["matchedCount"] == 1
    assert data["modifiedCount"] == 1
    assert data["upsertedId"] is None
    stored = db["recipies"].find_one({"_id": ObjectId(recipe_id)})
    assert stored["strTags"] == "Meat"
    assert stored["strMeal"] == "Beef Wellington"


def test_update_unknown_recipe_upserts(auth_client, db):
    recipe_id = str(ObjectId())

    response = auth_client.put(f"/recipie/{recipe_id}", json={"strMeal": "New Dish"})

    assert response.status_code == 200
    data = response.get_json()
    assert data["matchedCount"] == 0
    assert data["upsertedCount"] == 1
    assert data["upsertedId"] == recipe_id
    assert db["recipies"].find_one({"_id": ObjectId(recipe_id)})["strMeal"] == "New Dish"


def test_update_recipe_rejects_empty_body(auth_client, recipes):
    response = auth_client.put(f"/recipie/{recipes['Beef Wellington']}", json={})
    assert response.status_code == 400


def test_delete_recipe_removes_only_that_document(auth_client, recipes, db):
    recipe_id = recipes["Chocolate Gateau"]

    response = auth_client.delete(f"/recipie/{recipe_id}")

    assert response.status_code == 200
    assert response.get_json() == {"acknowledged": True, "deletedCount": 1}
    assert db["recipies"].find_one({"_id": ObjectId(recipe_id)}) is None
    assert db["recipies"].count_documents({}) == 2


def test_delete_unknown_recipe_reports_zero(auth_client, recipes, db):
    response = auth_client.delete(f"/recipie/{ObjectId()}")

    assert response.status_code == 200
    assert response.get_json()["deletedCount"] == 0
    assert db["recipies"].count_documents({}) == 3


def test_delete_recipe_requires_auth(client, recipes, db):
    response = client.delete(f"/recipie/{recipes['Chocolate Gateau']}")

    assert response.status_code == 401
    assert db["recipies"].count_documents({}) == 3


def test_store_failure_returns_structured_error(client):
    with mock.patch.object(RecipeService, "get_recipe", side_effect=ServerSelectionTimeoutError("timed out")):
        response = client.get(f"/recipies/{ObjectId()}")

    assert response.status_code == 500
    assert response.get_json() == {"success": False, "message": "Database operation failed"}


def test_update_recipe_rejects_dotted_keys(auth_client, recipes, db):
    recipe_id = recipes["Beef Wellington"]

    response = auth_client.put(f"/recipie/{recipe_id}", json={"strMeal.name": "Changed"})

    assert response.status_code == 400
    assert db["recipies"].find_one({"_id": ObjectId(recipe_id)})["strMeal"] == "Beef Wellington"
