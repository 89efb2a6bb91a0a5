# chef_vibes/models/__init__.py
from .base import DocumentPayload
from .kitchen import KitchenEntryCreate
from .recipe import RecipeCreate, RecipeUpdate
from .token import RESERVED_CLAIMS, TokenRequest

__all__ = [
    'DocumentPayload', 'KitchenEntryCreate', 'RecipeCreate', 'RecipeUpdate',
    'RESERVED_CLAIMS', 'TokenRequest'
]
