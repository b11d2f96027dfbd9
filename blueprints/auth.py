import dataclasses
import logging
from dataclasses import dataclass
from typing import Optional

from flask import Blueprint, Response
from flask.views import MethodView

from models import Identity
from models.errors import InvalidCredentials, ValidationError

from .util import app_container, class_route, json_response, load_json, requires_token

blp = Blueprint('Auth', __name__)

logger = logging.getLogger(__name__)


@dataclass
class LoginBody:
    username: Optional[str] = None
    password: Optional[str] = None


@class_route(blp, '/api/auth/login')
class Login(MethodView):
    init_every_request = False

    def post(self) -> Response:
        container = app_container()
        account_repo = container.account_repo()
        hasher = container.password_hasher()
        token_service = container.token_service()

        data: LoginBody = load_json(LoginBody)
        if not data.username or not data.password:
            raise ValidationError('Username and password required')

        account = account_repo.find_by_username(data.username)
        if account is None or not hasher.verify(data.password, account.password_hash):
            logger.info('Login failed for %s', data.username)
            raise InvalidCredentials

        token = token_service.issue(account)
        logger.info('Login successful for %s', account.username)

        return json_response(
            {
                'success': True,
                'message': 'Login successful',
                'token': token,
                'tokenType': 'Bearer',
                'expiresIn': token_service.expires_in_label,
                'user': {
                    'id': account.id,
                    'username': account.username,
                    'email': account.email,
                    'role': account.role.value,
                },
            },
            200,
        )


@class_route(blp, '/api/auth/verify')
class Verify(MethodView):
    init_every_request = False

    @requires_token
    def get(self, identity: Identity) -> Response:
        return json_response({'valid': True, 'user': dataclasses.asdict(identity), 'message': 'Token is valid'}, 200)
