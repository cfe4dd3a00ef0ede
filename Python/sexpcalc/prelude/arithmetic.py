import math
import operator
from functools import reduce
from typing import List
from ..errors import EvalError

def ieee_div(a: float, b: float) -> float:
    """Floating point division that yields inf/nan for a zero divisor instead of raising."""
    try:
        return a / b
    except ZeroDivisionError:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)

def eval_arithmetic(op: str, args: List[float]) -> float:
    if op == "+": return reduce(operator.add, args, 0.0)
    if op == "*": return reduce(operator.mul, args, 1.0)

    if op in ("-", "/") and not args:
        raise EvalError(f"arity: {op} expects at least 1 argument, got 0")
    if op == "-": return reduce(operator.sub, args[1:], args[0])
    if op == "/": return reduce(ieee_div, args[1:], args[0])

    raise EvalError(f"unknown operator: {op}")
