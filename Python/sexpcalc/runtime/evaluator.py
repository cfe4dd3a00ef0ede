from typing import List
from ..syntax import ast
from ..errors import EvalError
from ..parser import parse
from ..prelude import OPERATORS, initial_bindings, eval_primitive
from .types import Value, Void, VOID, Env

DEBUG_EVAL = False

def log(msg: str):
    if DEBUG_EVAL:
        print(f"[EVAL] {msg}")

def describe(val: Value) -> str:
    if isinstance(val, ast.Symbol): return f"symbol {val.name}"
    if isinstance(val, ast.ListExpr): return f"list {val}"
    if isinstance(val, Void): return "void value"
    return type(val).__name__

def expect_number(op: str, val: Value) -> float:
    if isinstance(val, ast.Number):
        return val.value
    raise EvalError(f"type mismatch: expected number, got {describe(val)} (in {op})")

def eval_expr(expr: Value, env: Env) -> Value:
    if isinstance(expr, ast.Number):
        return expr
    if isinstance(expr, ast.Symbol):
        log(f"lookup {expr.name}")
        return env.lookup(expr.name)
    if isinstance(expr, ast.ListExpr):
        return eval_list(expr, env)
    if isinstance(expr, Void):
        raise EvalError("void value: the result of () cannot be evaluated")
    raise EvalError(f"cannot evaluate {expr!r}")

def resolve_operator(head: ast.Expr, env: Env) -> str:
    # Two steps: the head is looked up, then the bound value is matched by name
    if not isinstance(head, ast.Symbol):
        raise EvalError(f"unknown operator: {ast.show_expr(head)}")
    bound = env.lookup(head.name)
    if not isinstance(bound, ast.Symbol) or bound.name not in OPERATORS:
        raise EvalError(f"unknown operator: {head.name}")
    return bound.name

def eval_list(expr: ast.ListExpr, env: Env) -> Value:
    if not expr.items:
        log("() -> void")
        return VOID

    op = resolve_operator(expr.items[0], env)
    args: List[float] = [expect_number(op, eval_expr(arg, env)) for arg in expr.items[1:]]
    result = eval_primitive(op, args)
    log(f"({op} {' '.join(str(ast.Number(a)) for a in args)}) -> {result}")
    return result

def eval_program(expr: ast.Expr) -> Value:
    env = Env.initial(initial_bindings)
    return eval_expr(expr, env)

def evaluate(text: str, debug: bool = False) -> Value:
    return eval_program(parse(text, debug=debug))
