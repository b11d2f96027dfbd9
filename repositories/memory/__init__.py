from .account import MemoryAccountRepository
from .employee import MemoryEmployeeRepository
from .seed import SEED_ACCOUNTS, SEED_EMPLOYEES

__all__ = ['MemoryAccountRepository', 'MemoryEmployeeRepository', 'SEED_ACCOUNTS', 'SEED_EMPLOYEES']
