from ..extensions import store
from ..utils import delete_result, insert_result, parse_object_id, update_result

# Heavy fields left out of the list view
LIST_PROJECTION = {
    'strYoutube': 0,
    'strTags': 0,
    'strInstructions': 0,
}


class RecipeService:
    """Service class for recipe documents"""

    @staticmethod
    def list_recipes():
        return list(store.recipes.find({}, LIST_PROJECTION))

    @staticmethod
    def get_recipe(recipe_id):
        """Return the full recipe document, or None when no recipe has that id."""
        return store.recipes.find_one({'_id': parse_object_id(recipe_id)})

    @staticmethod
    def create_recipe(recipe):
        result = store.recipes.insert_one(recipe.to_document())
        return insert_result(result)

    @staticmethod
    def upsert_recipe(recipe_id, changes):
        """Set the given fields on a recipe, creating it when the id is unknown."""
        result = store.recipes.update_one(
            {'_id': parse_object_id(recipe_id)},
            {'$set': changes.to_document()},
            upsert=True,
        )
        return update_result(result)

    @staticmethod
    def delete_recipe(recipe_id):
        result = store.recipes.delete_one({'_id': parse_object_id(recipe_id)})
        return delete_result(result)
