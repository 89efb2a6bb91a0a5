"""Pytest configuration and shared fixtures."""

import mongomock
import pytest

from chef_vibes import create_app
from chef_vibes.extensions import store

TEST_SECRET = "test_access_token_secret"


@pytest.fixture
def mongo_client():
    """In-memory MongoDB client."""
    return mongomock.MongoClient()


@pytest.fixture
def app(mongo_client):
    app = create_app({
        "TESTING": True,
        "ACCESS_TOKEN": TEST_SECRET,
        "MONGO_CLIENT": mongo_client,
        "MONGO_DB_NAME": "chef-vibes-test",
        "MONGO_PING_ON_STARTUP": False,
    })
    yield app
    store.close(app)


@pytest.fixture
def db(mongo_client):
    return mongo_client["chef-vibes-test"]


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def auth_client(client):
    """Test client holding a valid token cookie."""
    response = client.post("/jwt", json={"uid": "u1", "email": "u1@x.com"})
    assert response.status_code == 200
    return client


@pytest.fixture
def recipes(db):
    """Seed a few recipes and return their ids by name."""
    docs = [
        {
            "strMeal": "Apple Frangipan Tart",
            "strCategory": "Dessert",
            "strYoutube": "https://www.youtube.com/watch?v=rp8Slv4INLk",
            "strTags": "Tart,Baking,Fruity",
            "strInstructions": "Preheat the oven to 200C.",
        },
        {
            "strMeal": "Chocolate Gateau",
            "strCategory": "Dessert",
            "strYoutube": "https://www.youtube.com/watch?v=dsJtgmAhFF4",
            "strTags": "Cake,Chocolate",
            "strInstructions": "Melt the chocolate.",
        },
        {
            "strMeal": "Beef Wellington",
            "strCategory": "Beef",
            "strYoutube": "https://www.youtube.com/watch?v=FS8u1RBdf6I",
            "strTags": "Meat,Roast",
            "strInstructions": "Sear the beef.",
        },
    ]
    result = db["recipies"].insert_many(docs)
    return {doc["strMeal"]: str(_id) for doc, _id in zip(docs, result.inserted_ids)}


@pytest.fixture
def categories(db):
    db["categories"].insert_many([
        {"strCategory": "Beef", "strCategoryDescription": "Beef is the culinary name for meat from cattle."},
        {"strCategory": "Dessert", "strCategoryDescription": "Dessert is a course that concludes a meal."},
    ])
