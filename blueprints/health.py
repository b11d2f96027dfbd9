from datetime import datetime, timezone

from flask import Blueprint, Response
from flask.views import MethodView

from .util import class_route, json_response

blp = Blueprint('Health', __name__)


@class_route(blp, '/api/health')
class Health(MethodView):
    init_every_request = False

    def get(self) -> Response:
        return json_response(
            {
                'status': 'OK',
                'message': 'Employee API is running',
                'timestamp': datetime.now(timezone.utc).isoformat(timespec='milliseconds').replace('+00:00', 'Z'),
                'endpoints': {
                    'auth': '/api/auth/login',
                    'employees': '/api/employees',
                    'stats': '/api/employees/stats/summary',
                },
            },
            200,
        )
