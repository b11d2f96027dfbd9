from datetime import timedelta

from dependency_injector import containers, providers

from auth import PasswordHasher, TokenService
from repositories.memory import SEED_ACCOUNTS, SEED_EMPLOYEES, MemoryAccountRepository, MemoryEmployeeRepository


class Container(containers.DeclarativeContainer):
    config = providers.Configuration(
        default={
            'jwt': {'secret': 'your-secret-key-2024', 'expires_hours': 24},
            'seed': {'accounts': SEED_ACCOUNTS, 'employees': SEED_EMPLOYEES},
        }
    )

    password_hasher = providers.Singleton(PasswordHasher)

    token_service = providers.Singleton(
        TokenService,
        secret=config.jwt.secret,
        expires_in=providers.Factory(timedelta, hours=config.jwt.expires_hours.as_float()),
    )

    account_repo = providers.Singleton(
        MemoryAccountRepository,
        hasher=password_hasher,
        accounts=config.seed.accounts,
    )

    employee_repo = providers.Singleton(
        MemoryEmployeeRepository,
        employees=config.seed.employees,
    )
