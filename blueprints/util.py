import json
import logging
from collections.abc import Callable
from typing import Any, TypeVar

import marshmallow
import marshmallow_dataclass
from flask import Blueprint, Response, current_app, request
from flask.views import MethodView
from tightwrap import wraps
from werkzeug.exceptions import HTTPException

from containers import Container
from models import Identity, Role
from models.errors import Forbidden, ServiceError, Unauthenticated, ValidationError

JSON_VALIDATION_ERROR = 'Request body must be a JSON object.'

T = TypeVar('T')

ROLE_LABELS = {Role.ADMIN: 'Admin', Role.HR: 'HR', Role.EMPLOYEE: 'Employee'}

logger = logging.getLogger(__name__)


def class_route(blueprint: Blueprint, rule: str, **options: Any) -> Callable[[type[MethodView]], type[MethodView]]:  # noqa: ANN401
    def decorator(cls: type[MethodView]) -> type[MethodView]:
        blueprint.add_url_rule(rule, view_func=cls.as_view(cls.__name__), **options)
        return cls

    return decorator


def json_response(data: dict[str, Any] | list[dict[str, Any]], status: int) -> Response:
    return Response(json.dumps(data), status=status, mimetype='application/json')


def error_response(error: str, code: int, message: str | None = None, **extra: Any) -> Response:  # noqa: ANN401
    data: dict[str, Any] = {'error': error}
    if message is not None:
        data['message'] = message
    data.update(extra)
    data['code'] = code
    return json_response(data, code)


def service_error_response(err: ServiceError) -> Response:
    return error_response(err.error, err.code, err.message, **err.extra)


def validation_error_response(err: marshmallow.ValidationError) -> Response:
    return error_response('Validation error', 400, 'Invalid request data.', fields=err.messages)


def http_error_response(err: HTTPException) -> Response:
    return error_response(err.name, err.code or 500, err.description)


def internal_error_response(err: Exception) -> Response:
    logger.exception('Unhandled error')
    return error_response('Internal server error', 500, str(err))


def load_json(schema_cls: type[T]) -> T:
    req_json = request.get_json(silent=True)
    if not isinstance(req_json, dict):
        raise ValidationError(JSON_VALIDATION_ERROR)

    schema = marshmallow_dataclass.class_schema(schema_cls)(unknown=marshmallow.EXCLUDE)
    return schema.load(req_json)  # type: ignore[no-any-return]


def load_args(schema_cls: type[T]) -> T:
    schema = marshmallow_dataclass.class_schema(schema_cls)(unknown=marshmallow.EXCLUDE)
    return schema.load(request.args)  # type: ignore[no-any-return]


def app_container() -> Container:
    return current_app.container  # type: ignore[attr-defined,no-any-return]


def bearer_token() -> str | None:
    header = request.headers.get('Authorization')
    if not header:
        return None

    parts = header.split(' ')
    return parts[1] if len(parts) > 1 and parts[1] else None


def requires_token(f: Callable[..., Response]) -> Callable[..., Response]:
    @wraps(f)
    def decorated_function(*args, **kwargs) -> Response:  # type: ignore[no-untyped-def] # noqa: ANN002, ANN003
        token = bearer_token()
        if token is None:
            logger.info('Rejected %s %s: no bearer token', request.method, request.path)
            raise Unauthenticated

        identity = app_container().token_service().verify(token)

        return f(*args, identity=identity, **kwargs)

    return decorated_function


def requires_role(*roles: Role) -> Callable[[Callable[..., Response]], Callable[..., Response]]:
    allowed = [role.value for role in roles]
    labels = ' or '.join(ROLE_LABELS[role] for role in roles)

    def decorator(f: Callable[..., Response]) -> Callable[..., Response]:
        @wraps(f)
        def decorated_function(*args, identity: Identity, **kwargs) -> Response:  # type: ignore[no-untyped-def] # noqa: ANN002, ANN003
            if identity.role not in allowed:
                logger.info('Denied %s %s to %s (role %s)', request.method, request.path, identity.username, identity.role)
                raise Forbidden(identity.role, f'{labels} role required')

            return f(*args, identity=identity, **kwargs)

        return decorated_function

    return decorator
