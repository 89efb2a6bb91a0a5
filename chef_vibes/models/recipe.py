from pydantic import model_validator

from .base import DocumentPayload


class RecipeCreate(DocumentPayload):
    """Body of ``POST /recipie``; stored verbatim."""


class RecipeUpdate(DocumentPayload):
    """Body of ``PUT /recipie/<id>``; every field becomes a ``$set``."""

    @model_validator(mode='after')
    def check_not_empty(self):
        if not self.to_document():
            raise ValueError('Nothing to update')
        return self
