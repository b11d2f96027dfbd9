import json
from typing import Any

from faker import Faker
from flask.testing import FlaskClient

from app import FlaskMicroservice
from models import Account, Role


def login(client: FlaskClient, username: str = 'admin', password: str = 'admin123') -> str:
    resp = client.post('/api/auth/login', json={'username': username, 'password': password})
    return str(json.loads(resp.get_data())['token'])


def gen_token(app: FlaskMicroservice, role: Role, username: str = 'someone') -> str:
    account = Account(id=99, username=username, email=f'{username}@company.com', password_hash='', role=role)
    return app.container.token_service().issue(account)


def auth_header(token: str) -> dict[str, str]:
    return {'Authorization': f'Bearer {token}'}


def gen_employee_body(faker: Faker) -> dict[str, Any]:
    return {
        'firstName': faker.first_name(),
        'lastName': faker.last_name(),
        'email': faker.unique.email(),
        'phone': faker.phone_number(),
        'department': 'IT',
        'position': faker.job(),
        'salary': 70000,
        'hireDate': '2024-01-15',
    }
