from dataclasses import dataclass
from enum import Enum


class EmployeeStatus(Enum):
    ACTIVE = 'active'
    INACTIVE = 'inactive'


@dataclass
class Employee:
    id: int
    first_name: str
    last_name: str
    email: str
    phone: str
    department: str
    position: str
    salary: float
    hire_date: str
    status: str
    created_at: str
    updated_at: str


@dataclass
class Page:
    items: list[Employee]
    current_page: int
    total_pages: int
    total_filtered: int
    limit: int


@dataclass
class EmployeeStats:
    total_employees: int
    active_employees: int
    inactive_employees: int
    department_breakdown: dict[str, int]
    average_salary: int | None


JSON_KEYS = {
    'id': 'id',
    'first_name': 'firstName',
    'last_name': 'lastName',
    'email': 'email',
    'phone': 'phone',
    'department': 'department',
    'position': 'position',
    'salary': 'salary',
    'hire_date': 'hireDate',
    'status': 'status',
    'created_at': 'createdAt',
    'updated_at': 'updatedAt',
}
