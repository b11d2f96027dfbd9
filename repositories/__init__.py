from .account import AccountRepository
from .employee import EmployeeRepository

__all__ = ['AccountRepository', 'EmployeeRepository']
