from pydantic import Field

from .base import DocumentPayload


class KitchenEntryCreate(DocumentPayload):
    """A recipe saved to a user's kitchen."""

    email: str = Field(..., min_length=1)
    recipieId: str = Field(..., min_length=1)
