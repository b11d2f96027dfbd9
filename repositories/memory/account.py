from typing import Any

import dacite

from auth import PasswordHasher
from models import Account, Role
from repositories import AccountRepository


class MemoryAccountRepository(AccountRepository):
    def __init__(self, hasher: PasswordHasher, accounts: list[dict[str, Any]]) -> None:
        self.accounts: dict[str, Account] = {}

        for record in accounts:
            data = {k: v for k, v in record.items() if k != 'password'}
            data['password_hash'] = hasher.hash(record['password'])
            account = dacite.from_dict(data_class=Account, data=data, config=dacite.Config(cast=[Role]))
            if account.username in self.accounts:
                raise ValueError(f'Duplicate username: {account.username}')
            self.accounts[account.username] = account

    def find_by_username(self, username: str) -> Account | None:
        return self.accounts.get(username)
