import threading
from typing import Any

from faker import Faker
from unittest_parametrize import ParametrizedTestCase, parametrize

from models.errors import DuplicateEmail, MissingRequiredFields, NoFieldsProvided, NotFound
from repositories.memory import SEED_EMPLOYEES, MemoryEmployeeRepository
from repositories.memory.employee import parse_id


class TestMemoryEmployeeRepository(ParametrizedTestCase):
    def setUp(self) -> None:
        self.faker = Faker()
        self.repo = MemoryEmployeeRepository(SEED_EMPLOYEES)

    def gen_fields(self) -> dict[str, Any]:
        return {
            'first_name': self.faker.first_name(),
            'last_name': self.faker.last_name(),
            'email': self.faker.unique.email(),
            'department': self.faker.word(),
            'position': self.faker.job(),
        }

    @parametrize(
        'value,expected',
        [
            ('12', 12),
            (' 7', 7),
            ('3abc', 3),
            ('-2', -2),
            ('abc', None),
            ('', None),
            (5, 5),
        ],
    )
    def test_parse_id(self, value: int | str, expected: int | None) -> None:
        self.assertEqual(parse_id(value), expected)

    def test_query_seed(self) -> None:
        page = self.repo.query(status='active', department=None, page=1, limit=10)

        self.assertEqual(len(page.items), 3)
        self.assertEqual(page.total_pages, 1)
        self.assertEqual(page.total_filtered, 3)

    def test_query_returns_copies(self) -> None:
        page = self.repo.query(status='active', department=None, page=1, limit=10)
        page.items[0].first_name = 'Changed'

        self.assertEqual(self.repo.get(1).first_name, 'John')

    def test_create(self) -> None:
        fields = self.gen_fields()

        employee = self.repo.create(fields)

        self.assertEqual(employee.id, 4)
        self.assertEqual(employee.status, 'active')
        self.assertEqual(employee.salary, 0)
        self.assertEqual(self.repo.get(4), employee)

    def test_create_missing(self) -> None:
        fields = self.gen_fields()
        fields['position'] = ''

        with self.assertRaises(MissingRequiredFields) as ctx:
            self.repo.create(fields)

        self.assertEqual(ctx.exception.extra['required'], ['firstName', 'lastName', 'email', 'department', 'position'])

    def test_create_duplicate(self) -> None:
        fields = self.gen_fields()
        self.repo.create(fields)

        with self.assertRaises(DuplicateEmail):
            self.repo.create({**self.gen_fields(), 'email': fields['email']})

        self.assertEqual(self.repo.summary().total_employees, 4)

    def test_email_case_sensitive(self) -> None:
        employee = self.repo.create({**self.gen_fields(), 'email': 'JOHN.DOE@company.com'})

        self.assertEqual(employee.email, 'JOHN.DOE@company.com')

    def test_concurrent_create(self) -> None:
        fields = self.gen_fields()
        errors: list[Exception] = []

        def create() -> None:
            try:
                self.repo.create(dict(fields))
            except DuplicateEmail as err:
                errors.append(err)

        threads = [threading.Thread(target=create) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        self.assertEqual(len(errors), 7)
        self.assertEqual(self.repo.summary().total_employees, 4)

    def test_replace_salary_zero(self) -> None:
        employee = self.repo.replace(1, {'salary': 0, 'first_name': ''})

        self.assertEqual(employee.salary, 0)
        self.assertEqual(employee.first_name, 'John')
        self.assertEqual(employee.created_at, '2022-01-15T09:00:00Z')

    def test_partial_update(self) -> None:
        employee, updated = self.repo.partial_update('2', {'salary': 0, 'phone': '', 'unknown': 'x'})

        self.assertEqual(employee.salary, 0)
        self.assertEqual(employee.phone, '')
        self.assertEqual(updated, ['phone', 'salary'])

    def test_partial_update_empty_email_unique(self) -> None:
        employee, _ = self.repo.partial_update(1, {'email': ''})
        self.assertEqual(employee.email, '')

        with self.assertRaises(DuplicateEmail):
            self.repo.partial_update(2, {'email': ''})

        self.assertEqual(self.repo.get(2).email, 'jane.smith@company.com')

    def test_partial_update_no_fields(self) -> None:
        with self.assertRaises(NoFieldsProvided):
            self.repo.partial_update(2, {'unknown': 'x'})

    def test_partial_update_not_found(self) -> None:
        with self.assertRaises(NotFound):
            self.repo.partial_update(9, {'salary': 1})

    def test_soft_delete_idempotent(self) -> None:
        first = self.repo.delete(1, permanent=False)
        second = self.repo.delete(1, permanent=False)

        self.assertEqual(first.status, 'inactive')
        self.assertEqual(second.status, 'inactive')
        self.assertEqual(self.repo.get(1).status, 'inactive')

    def test_hard_delete(self) -> None:
        removed = self.repo.delete(3, permanent=True)

        self.assertEqual(removed.id, 3)
        with self.assertRaises(NotFound):
            self.repo.get(3)

    def test_summary_empty(self) -> None:
        stats = MemoryEmployeeRepository([]).summary()

        self.assertEqual(stats.total_employees, 0)
        self.assertIsNone(stats.average_salary)
        self.assertEqual(stats.department_breakdown, {})

    @parametrize(
        'salaries,expected',
        [
            ([1.0, 2.0], 2),
            ([1.0, 1.0, 2.0], 1),
            ([2.0, 3.0], 3),
        ],
    )
    def test_summary_rounds_half_up(self, salaries: list[float], expected: int) -> None:
        seed = [{**SEED_EMPLOYEES[0], 'id': i + 1, 'email': f'{i}@x.com', 'salary': s} for i, s in enumerate(salaries)]

        self.assertEqual(MemoryEmployeeRepository(seed).summary().average_salary, expected)
