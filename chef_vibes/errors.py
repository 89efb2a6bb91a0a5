import logging

from bson.errors import InvalidId
from flask import jsonify
from pydantic import ValidationError
from pymongo.errors import PyMongoError
from werkzeug.exceptions import HTTPException

from .extensions import jwt

logger = logging.getLogger(__name__)


def error_response(message, status, **extra):
    body = {'success': False, 'message': message}
    body.update(extra)
    return jsonify(body), status


# Auth gate: a missing cookie is 401, a cookie that fails verification is 403

@jwt.unauthorized_loader
def missing_token(reason):
    logger.debug(f"Rejected request without token: {reason}")
    return error_response('Unauthorized', 401)


@jwt.invalid_token_loader
def invalid_token(reason):
    return error_response(reason, 403)


@jwt.expired_token_loader
def expired_token(jwt_header, jwt_payload):
    return error_response('Signature has expired', 403)


def handle_validation_error(e):
    errors = e.errors(include_url=False, include_context=False, include_input=False)
    return error_response('Invalid request body', 400, errors=errors)


def handle_invalid_id(e):
    return error_response('Invalid id', 400)


def handle_store_error(e):
    logger.exception(f"Database operation failed: {e}")
    return error_response('Database operation failed', 500)


def handle_http_error(e):
    return error_response(e.description, e.code)


def register_error_handlers(app):
    app.register_error_handler(ValidationError, handle_validation_error)
    app.register_error_handler(InvalidId, handle_invalid_id)
    app.register_error_handler(PyMongoError, handle_store_error)
    app.register_error_handler(HTTPException, handle_http_error)
