from dataclasses import dataclass
from typing import Tuple
from ..errors import EvalError

# ======================================
# Expression Nodes
# ======================================

class Expr: pass

@dataclass(frozen=True)
class Number(Expr):
    value: float
    def __str__(self): return f"{self.value:f}"

@dataclass(frozen=True)
class Symbol(Expr):
    name: str
    def __str__(self): return self.name

@dataclass(frozen=True)
class ListExpr(Expr):
    items: Tuple[Expr, ...] = ()
    def __str__(self): return "(" + " ".join(show_expr(e) for e in self.items) + ")"

def show_expr(expr: Expr) -> str:
    if isinstance(expr, (Number, Symbol, ListExpr)):
        return str(expr)
    # Only tree nodes have a textual form
    raise EvalError(f"void value: {expr!r} cannot be rendered")
