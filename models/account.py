from dataclasses import dataclass

from models.role import Role


@dataclass
class Account:
    id: int
    username: str
    email: str
    password_hash: str
    role: Role
