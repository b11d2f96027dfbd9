import dataclasses
import logging
from dataclasses import dataclass, field
from typing import Any, Optional

import marshmallow
from flask import Blueprint, Response, request
from flask.views import MethodView

from models import JSON_KEYS, Employee, EmployeeStatus, Identity, Role

from .util import app_container, class_route, json_response, load_args, load_json, requires_role, requires_token

blp = Blueprint('Employees', __name__)

logger = logging.getLogger(__name__)

STATUS_VALUES = [s.value for s in EmployeeStatus]


def json_number(value: float) -> int | float:
    return int(value) if float(value).is_integer() else value


def employee_to_dict(employee: Employee) -> dict[str, Any]:
    data = {JSON_KEYS[k]: v for k, v in dataclasses.asdict(employee).items()}
    data['salary'] = json_number(employee.salary)
    return data


def provided_fields(body: object) -> dict[str, Any]:
    return {k: v for k, v in dataclasses.asdict(body).items() if v is not None}  # type: ignore[call-overload]


# Employee validation class; every field is optional here, required fields are
# checked by the repository on create.
@dataclass
class EmployeeBody:
    first_name: Optional[str] = field(default=None, metadata={'data_key': 'firstName'})
    last_name: Optional[str] = field(default=None, metadata={'data_key': 'lastName'})
    email: Optional[str] = field(default=None, metadata={'validate': marshmallow.validate.Length(max=254)})
    phone: Optional[str] = None
    department: Optional[str] = None
    position: Optional[str] = None
    salary: Optional[float] = field(default=None, metadata={'validate': marshmallow.validate.Range(min=0)})
    hire_date: Optional[str] = field(
        default=None,
        metadata={'data_key': 'hireDate', 'validate': marshmallow.validate.Regexp(r'^\d{4}-\d{2}-\d{2}$')},
    )
    status: Optional[str] = field(default=None, metadata={'validate': marshmallow.validate.OneOf(STATUS_VALUES)})


BODY_KEYS = [f.metadata.get('data_key', f.name) for f in dataclasses.fields(EmployeeBody)]


def reject_nulls() -> None:
    body = request.get_json(silent=True) or {}
    nulls = {k: ['Field may not be null.'] for k in BODY_KEYS if k in body and body[k] is None}
    if nulls:
        raise marshmallow.ValidationError(nulls)


@dataclass
class EmployeeListArgs:
    page: int = field(default=1, metadata={'validate': marshmallow.validate.Range(min=1)})
    limit: int = field(default=10, metadata={'validate': marshmallow.validate.Range(min=1)})
    department: Optional[str] = None
    status: str = EmployeeStatus.ACTIVE.value


@class_route(blp, '/api/employees')
class Employees(MethodView):
    init_every_request = False

    @requires_token
    def get(self, identity: Identity) -> Response:
        employee_repo = app_container().employee_repo()
        args: EmployeeListArgs = load_args(EmployeeListArgs)
        page = employee_repo.query(status=args.status, department=args.department, page=args.page, limit=args.limit)

        return json_response(
            {
                'success': True,
                'message': 'Employees fetched successfully',
                'data': [employee_to_dict(e) for e in page.items],
                'pagination': {
                    'currentPage': page.current_page,
                    'totalPages': page.total_pages,
                    'totalFiltered': page.total_filtered,
                    'limit': page.limit,
                },
                'requestedBy': identity.username,
            },
            200,
        )

    @requires_token
    @requires_role(Role.ADMIN, Role.HR)
    def post(self, identity: Identity) -> Response:
        employee_repo = app_container().employee_repo()
        data: EmployeeBody = load_json(EmployeeBody)
        employee = employee_repo.create(provided_fields(data))
        logger.info('Employee %d created by %s', employee.id, identity.username)

        return json_response(
            {
                'success': True,
                'message': 'Employee created successfully',
                'data': employee_to_dict(employee),
                'createdBy': identity.username,
            },
            201,
        )


@class_route(blp, '/api/employees/<employee_id>')
class EmployeeDetail(MethodView):
    init_every_request = False

    @requires_token
    def get(self, employee_id: str, identity: Identity) -> Response:
        employee_repo = app_container().employee_repo()
        employee = employee_repo.get(employee_id)

        return json_response(
            {
                'success': True,
                'message': 'Employee fetched successfully',
                'data': employee_to_dict(employee),
                'requestedBy': identity.username,
            },
            200,
        )

    @requires_token
    @requires_role(Role.ADMIN, Role.HR)
    def put(self, employee_id: str, identity: Identity) -> Response:
        employee_repo = app_container().employee_repo()
        data: EmployeeBody = load_json(EmployeeBody)
        employee = employee_repo.replace(employee_id, provided_fields(data))
        logger.info('Employee %d replaced by %s', employee.id, identity.username)

        return json_response(
            {
                'success': True,
                'message': 'Employee updated successfully',
                'data': employee_to_dict(employee),
                'updatedBy': identity.username,
            },
            200,
        )

    @requires_token
    @requires_role(Role.ADMIN, Role.HR)
    def patch(self, employee_id: str, identity: Identity) -> Response:
        employee_repo = app_container().employee_repo()
        data: EmployeeBody = load_json(EmployeeBody)
        reject_nulls()
        employee, updated = employee_repo.partial_update(employee_id, provided_fields(data))
        logger.info('Employee %d updated by %s: %s', employee.id, identity.username, ', '.join(updated))

        return json_response(
            {
                'success': True,
                'message': 'Employee updated successfully',
                'data': employee_to_dict(employee),
                'updatedFields': [JSON_KEYS[f] for f in updated],
                'updatedBy': identity.username,
            },
            200,
        )

    @requires_token
    @requires_role(Role.ADMIN, Role.HR)
    def delete(self, employee_id: str, identity: Identity) -> Response:
        employee_repo = app_container().employee_repo()
        permanent = request.args.get('permanent') == 'true'
        employee = employee_repo.delete(employee_id, permanent=permanent)
        logger.info('Employee %d %s by %s', employee.id, 'deleted' if permanent else 'deactivated', identity.username)

        return json_response(
            {
                'success': True,
                'message': 'Employee deleted successfully' if permanent else 'Employee deactivated (soft delete)',
                'data': employee_to_dict(employee),
                'deletedBy': identity.username,
                'permanent': permanent,
            },
            200,
        )


@class_route(blp, '/api/employees/stats/summary')
class EmployeeSummary(MethodView):
    init_every_request = False

    @requires_token
    def get(self, identity: Identity) -> Response:
        employee_repo = app_container().employee_repo()
        stats = employee_repo.summary()

        return json_response(
            {
                'success': True,
                'message': 'Employee statistics fetched successfully',
                'data': {
                    'totalEmployees': stats.total_employees,
                    'activeEmployees': stats.active_employees,
                    'inactiveEmployees': stats.inactive_employees,
                    'departmentBreakdown': stats.department_breakdown,
                    'averageSalary': stats.average_salary,
                },
                'requestedBy': identity.username,
            },
            200,
        )
