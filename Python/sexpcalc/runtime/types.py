from dataclasses import dataclass
from typing import Dict, Optional, Union
from ..syntax import ast
from ..errors import UnboundSymbolError

# ======================================
# Values & Environment
# ======================================

@dataclass(frozen=True)
class Void:
    """Result of evaluating `()`. It has no textual form and is not a number."""

VOID = Void()

Value = Union[ast.Expr, Void]

class Env:
    def __init__(self, bindings: Dict[str, ast.Expr]):
        self._bindings = dict(bindings)

    def lookup(self, name: str) -> ast.Expr:
        val = self._bindings.get(name)
        if val is None:
            raise UnboundSymbolError(name)
        return val

    def get(self, name: str) -> Optional[ast.Expr]: return self._bindings.get(name)
    def contains(self, name: str) -> bool: return name in self._bindings
    def names(self): return sorted(self._bindings)

    @staticmethod
    def initial(bindings: Dict[str, ast.Expr]) -> 'Env':
        return Env(bindings)
