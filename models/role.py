from enum import Enum


class Role(Enum):
    ADMIN = 'admin'
    HR = 'hr'
    EMPLOYEE = 'employee'
