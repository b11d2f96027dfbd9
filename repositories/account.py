from models import Account


class AccountRepository:
    def find_by_username(self, username: str) -> Account | None:
        raise NotImplementedError  # pragma: no cover
