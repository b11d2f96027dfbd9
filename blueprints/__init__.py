# ruff: noqa: N812

from .auth import blp as BlueprintAuth
from .employee import blp as BlueprintEmployee
from .health import blp as BlueprintHealth

__all__ = ['BlueprintAuth', 'BlueprintEmployee', 'BlueprintHealth']
