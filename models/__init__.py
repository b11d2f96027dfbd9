from .account import Account
from .employee import JSON_KEYS, Employee, EmployeeStats, EmployeeStatus, Page
from .identity import Identity
from .role import Role

__all__ = ['JSON_KEYS', 'Account', 'Employee', 'EmployeeStats', 'EmployeeStatus', 'Identity', 'Page', 'Role']
