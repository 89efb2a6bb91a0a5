from pydantic import BaseModel, ConfigDict, model_validator

# Claims flask_jwt_extended writes itself; a caller must not override them.
RESERVED_CLAIMS = frozenset({'exp', 'iat', 'nbf', 'jti', 'sub', 'type', 'fresh', 'csrf'})


class TokenRequest(BaseModel):
    """Claims a client asks ``POST /jwt`` to sign."""

    model_config = ConfigDict(extra='allow')

    @model_validator(mode='before')
    @classmethod
    def check_claims(cls, data):
        if not isinstance(data, dict):
            raise ValueError('Request body must be a JSON object')
        reserved = sorted(RESERVED_CLAIMS.intersection(data))
        if reserved:
            raise ValueError(f'Reserved claims may not be set: {", ".join(reserved)}')
        return data

    @property
    def claims(self):
        return self.model_dump()

    @property
    def subject(self):
        claims = self.claims
        return str(claims.get('email') or claims.get('uid') or 'anonymous')
