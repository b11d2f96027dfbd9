import logging
import os
from typing import Any

import marshmallow
from flask import Flask
from werkzeug.exceptions import HTTPException

from blueprints import BlueprintAuth, BlueprintEmployee, BlueprintHealth
from blueprints.util import http_error_response, internal_error_response, service_error_response, validation_error_response
from containers import Container
from models.errors import ServiceError


class FlaskMicroservice(Flask):
    container: Container


def create_app(config: dict[str, Any] | None = None) -> FlaskMicroservice:
    logging.basicConfig(level=os.getenv('LOG_LEVEL', 'INFO').upper())

    app = FlaskMicroservice(__name__)
    app.container = Container()

    if 'JWT_SECRET' in os.environ:  # pragma: no cover
        app.container.config.jwt.secret.from_env('JWT_SECRET')

    if 'JWT_EXPIRES_HOURS' in os.environ:  # pragma: no cover
        app.container.config.jwt.expires_hours.from_env('JWT_EXPIRES_HOURS')

    if config is not None:
        app.container.config.from_dict(config)

    app.register_error_handler(ServiceError, service_error_response)
    app.register_error_handler(marshmallow.ValidationError, validation_error_response)
    app.register_error_handler(HTTPException, http_error_response)
    app.register_error_handler(Exception, internal_error_response)

    app.register_blueprint(BlueprintHealth)
    app.register_blueprint(BlueprintAuth)
    app.register_blueprint(BlueprintEmployee)

    return app
