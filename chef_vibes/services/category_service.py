import re

from ..extensions import store


class CategoryService:
    """Service class for category lookups"""

    @staticmethod
    def list_categories():
        return list(store.categories.find())

    @staticmethod
    def category_filter(category):
        # Literal, case-insensitive substring match on strCategory
        return {'strCategory': {'$regex': re.escape(category), '$options': 'i'}}

    @classmethod
    def lookup(cls, category):
        """
        Fetch a category and every recipe filed under it.

        Returns:
            dict: ``categoryInfo`` (the first matching category or None) and
            ``foods`` (all matching recipes).
        """
        query = cls.category_filter(category)
        foods = list(store.recipes.find(query))
        category_info = store.categories.find_one(query)
        return {'categoryInfo': category_info, 'foods': foods}
