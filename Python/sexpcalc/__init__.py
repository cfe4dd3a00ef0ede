
from .errors import SexpError, SexpSyntaxError, EvalError, UnboundSymbolError
from .syntax.ast import Expr, Number, Symbol, ListExpr, show_expr
from .parser import parse, Parser
from .runtime import Env, Value, Void, VOID, eval_expr, eval_program, evaluate
from .prelude import OPERATORS, initial_bindings

__all__ = [
    "SexpError", "SexpSyntaxError", "EvalError", "UnboundSymbolError",
    "Expr", "Number", "Symbol", "ListExpr", "show_expr",
    "parse", "Parser",
    "Env", "Value", "Void", "VOID",
    "eval_expr", "eval_program", "evaluate",
    "OPERATORS", "initial_bindings"
]
