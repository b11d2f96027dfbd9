from typing import Any

SEED_ACCOUNTS: list[dict[str, Any]] = [
    {
        'id': 1,
        'username': 'admin',
        'email': 'admin@company.com',
        'password': 'admin123',
        'role': 'admin',
    },
    {
        'id': 2,
        'username': 'hr_manager',
        'email': 'hr@company.com',
        'password': 'hr123',
        'role': 'hr',
    },
]

SEED_EMPLOYEES: list[dict[str, Any]] = [
    {
        'id': 1,
        'first_name': 'John',
        'last_name': 'Doe',
        'email': 'john.doe@company.com',
        'phone': '+1-555-0101',
        'department': 'Engineering',
        'position': 'Senior Developer',
        'salary': 85000.0,
        'hire_date': '2022-01-15',
        'status': 'active',
        'created_at': '2022-01-15T09:00:00Z',
        'updated_at': '2022-01-15T09:00:00Z',
    },
    {
        'id': 2,
        'first_name': 'Jane',
        'last_name': 'Smith',
        'email': 'jane.smith@company.com',
        'phone': '+1-555-0102',
        'department': 'Marketing',
        'position': 'Marketing Manager',
        'salary': 75000.0,
        'hire_date': '2021-08-20',
        'status': 'active',
        'created_at': '2021-08-20T10:30:00Z',
        'updated_at': '2021-08-20T10:30:00Z',
    },
    {
        'id': 3,
        'first_name': 'Mike',
        'last_name': 'Johnson',
        'email': 'mike.johnson@company.com',
        'phone': '+1-555-0103',
        'department': 'Sales',
        'position': 'Sales Representative',
        'salary': 55000.0,
        'hire_date': '2023-03-10',
        'status': 'active',
        'created_at': '2023-03-10T14:15:00Z',
        'updated_at': '2023-03-10T14:15:00Z',
    },
]
