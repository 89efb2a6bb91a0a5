import logging

from flask import jsonify
from flask_jwt_extended import set_access_cookies

from . import auth_bp
from ..models import TokenRequest
from ..services import AuthService
from ..utils import parse_body

logger = logging.getLogger(__name__)


@auth_bp.route('/jwt', methods=['POST'])
def issue_jwt():
    """Sign the posted claims and hand the token back as a cookie and in the body"""
    token_request = parse_body(TokenRequest)
    token = AuthService.issue_token(token_request)
    lifetime = AuthService.token_lifetime()
    logger.info(f"Issued access token for {token_request.subject}, valid for {lifetime}")

    response = jsonify({'success': True, 'token': token})
    # Werkzeug derives the cookie's Expires date from max_age
    set_access_cookies(response, token, max_age=int(lifetime.total_seconds()))
    return response, 200
