from dataclasses import dataclass


@dataclass
class Identity:
    id: int
    username: str
    email: str
    role: str
