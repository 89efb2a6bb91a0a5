from pydantic import BaseModel, ConfigDict, model_validator


class DocumentPayload(BaseModel):
    """Free-form JSON object headed for a collection.

    Unknown fields are kept as-is. Keys the store would interpret as
    operators, field paths or the document id are refused.
    """

    model_config = ConfigDict(extra='allow')

    @model_validator(mode='before')
    @classmethod
    def check_keys(cls, data):
        if not isinstance(data, dict):
            raise ValueError('Request body must be a JSON object')
        for key in data:
            if key == '_id':
                raise ValueError('Field "_id" is assigned by the server')
            if key.startswith('$'):
                raise ValueError(f'Field "{key}" may not start with "$"')
            if '.' in key:
                raise ValueError(f'Field "{key}" may not contain "."')
        return data

    def to_document(self):
        return self.model_dump()
