from bson import ObjectId
from flask import request


def parse_body(model):
    """Validate the JSON request body against ``model``.

    Raises ``pydantic.ValidationError`` on bad input; the app-wide error
    handler turns that into a 400 response.
    """
    data = request.get_json(silent=True)
    return model.model_validate(data)


def parse_object_id(value):
    """Turn a path segment into an ``ObjectId`` (raises ``InvalidId``)."""
    return ObjectId(value)
