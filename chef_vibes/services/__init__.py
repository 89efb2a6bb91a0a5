from .auth_service import AuthService
from .category_service import CategoryService
from .kitchen_service import KitchenService
from .recipe_service import RecipeService

__all__ = ['AuthService', 'CategoryService', 'KitchenService', 'RecipeService']
