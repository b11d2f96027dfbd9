from .password import PasswordHasher
from .token import TokenService

__all__ = ['PasswordHasher', 'TokenService']
