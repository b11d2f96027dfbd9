import dataclasses
import math
import re
import threading
from collections import Counter
from datetime import date, datetime, timezone
from typing import Any

import dacite

from models import JSON_KEYS, Employee, EmployeeStats, EmployeeStatus, Page
from models.errors import DuplicateEmail, MissingRequiredFields, NoFieldsProvided, NotFound
from repositories import EmployeeRepository

REQUIRED_FIELDS = ['first_name', 'last_name', 'email', 'department', 'position']
UPDATABLE_FIELDS = ['first_name', 'last_name', 'email', 'phone', 'department', 'position', 'salary', 'status']

# Fields that keep their previous value on replace unless the new one is truthy.
REPLACE_TRUTHY_FIELDS = ['first_name', 'last_name', 'email', 'department', 'position', 'status']

ID_PREFIX = re.compile(r'\s*([+-]?\d+)')


def parse_id(employee_id: int | str) -> int | None:
    if isinstance(employee_id, int):
        return employee_id

    match = ID_PREFIX.match(employee_id)
    return int(match.group(1)) if match else None


def timestamp() -> str:
    return datetime.now(timezone.utc).isoformat(timespec='milliseconds').replace('+00:00', 'Z')


class MemoryEmployeeRepository(EmployeeRepository):
    """Process-scoped employee collection.

    Every public method holds ``lock`` for its whole duration. Returned
    records are copies.
    """

    def __init__(self, employees: list[dict[str, Any]]) -> None:
        self.lock = threading.RLock()
        self.employees: list[Employee] = [dacite.from_dict(data_class=Employee, data=e) for e in employees]
        self.next_id = max((e.id for e in self.employees), default=0) + 1

    def _index(self, employee_id: int | str) -> int:
        parsed = parse_id(employee_id)
        for idx, employee in enumerate(self.employees):
            if employee.id == parsed:
                return idx

        raise NotFound(employee_id)

    def _check_email(self, email: str, current: Employee | None = None) -> None:
        if current is not None and email == current.email:
            return

        if any(e.email == email for e in self.employees):
            raise DuplicateEmail(email)

    def query(
        self, *, status: str = EmployeeStatus.ACTIVE.value, department: str | None = None, page: int = 1, limit: int = 10
    ) -> Page:
        with self.lock:
            filtered = [e for e in self.employees if e.status == status]

            if department:
                needle = department.lower()
                filtered = [e for e in filtered if needle in e.department.lower()]

            start = (page - 1) * limit
            return Page(
                items=[dataclasses.replace(e) for e in filtered[start : start + limit]],
                current_page=page,
                total_pages=math.ceil(len(filtered) / limit),
                total_filtered=len(filtered),
                limit=limit,
            )

    def get(self, employee_id: int | str) -> Employee:
        with self.lock:
            return dataclasses.replace(self.employees[self._index(employee_id)])

    def create(self, fields: dict[str, Any]) -> Employee:
        with self.lock:
            if not all(fields.get(f) for f in REQUIRED_FIELDS):
                raise MissingRequiredFields([JSON_KEYS[f] for f in REQUIRED_FIELDS])

            self._check_email(fields['email'])

            now = timestamp()
            employee = Employee(
                id=self.next_id,
                first_name=fields['first_name'],
                last_name=fields['last_name'],
                email=fields['email'],
                phone=fields.get('phone') or '',
                department=fields['department'],
                position=fields['position'],
                salary=fields.get('salary') or 0.0,
                hire_date=fields.get('hire_date') or date.today().isoformat(),
                status=EmployeeStatus.ACTIVE.value,
                created_at=now,
                updated_at=now,
            )

            self.next_id += 1
            self.employees.append(employee)
            return dataclasses.replace(employee)

    def replace(self, employee_id: int | str, fields: dict[str, Any]) -> Employee:
        with self.lock:
            idx = self._index(employee_id)
            current = self.employees[idx]

            if fields.get('email'):
                self._check_email(fields['email'], current)

            changes = {f: fields[f] for f in REPLACE_TRUTHY_FIELDS if fields.get(f)}
            for f in ('phone', 'salary'):
                if fields.get(f) is not None:
                    changes[f] = fields[f]

            self.employees[idx] = dataclasses.replace(current, **changes, updated_at=timestamp())
            return dataclasses.replace(self.employees[idx])

    def partial_update(self, employee_id: int | str, fields: dict[str, Any]) -> tuple[Employee, list[str]]:
        with self.lock:
            idx = self._index(employee_id)
            current = self.employees[idx]

            updates = {f: fields[f] for f in UPDATABLE_FIELDS if fields.get(f) is not None}
            if not updates:
                raise NoFieldsProvided([JSON_KEYS[f] for f in UPDATABLE_FIELDS])

            if 'email' in updates:
                self._check_email(updates['email'], current)

            self.employees[idx] = dataclasses.replace(current, **updates, updated_at=timestamp())
            return dataclasses.replace(self.employees[idx]), list(updates)

    def delete(self, employee_id: int | str, *, permanent: bool) -> Employee:
        with self.lock:
            idx = self._index(employee_id)

            if permanent:
                return self.employees.pop(idx)

            self.employees[idx] = dataclasses.replace(
                self.employees[idx],
                status=EmployeeStatus.INACTIVE.value,
                updated_at=timestamp(),
            )
            return dataclasses.replace(self.employees[idx])

    def summary(self) -> EmployeeStats:
        with self.lock:
            total = len(self.employees)
            average = None
            if total:
                # Half-up, not banker's rounding
                average = math.floor(sum(e.salary for e in self.employees) / total + 0.5)

            return EmployeeStats(
                total_employees=total,
                active_employees=sum(1 for e in self.employees if e.status == EmployeeStatus.ACTIVE.value),
                inactive_employees=sum(1 for e in self.employees if e.status == EmployeeStatus.INACTIVE.value),
                department_breakdown=dict(Counter(e.department for e in self.employees)),
                average_salary=average,
            )
