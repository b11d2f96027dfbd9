from typing import Any

from models import Employee, EmployeeStats, Page


class EmployeeRepository:
    def query(self, *, status: str, department: str | None, page: int, limit: int) -> Page:
        raise NotImplementedError  # pragma: no cover

    def get(self, employee_id: int | str) -> Employee:
        raise NotImplementedError  # pragma: no cover

    def create(self, fields: dict[str, Any]) -> Employee:
        raise NotImplementedError  # pragma: no cover

    def replace(self, employee_id: int | str, fields: dict[str, Any]) -> Employee:
        raise NotImplementedError  # pragma: no cover

    def partial_update(self, employee_id: int | str, fields: dict[str, Any]) -> tuple[Employee, list[str]]:
        raise NotImplementedError  # pragma: no cover

    def delete(self, employee_id: int | str, *, permanent: bool) -> Employee:
        raise NotImplementedError  # pragma: no cover

    def summary(self) -> EmployeeStats:
        raise NotImplementedError  # pragma: no cover
