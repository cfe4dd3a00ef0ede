from typing import List
from ..syntax.ast import Number
from . import arithmetic

def eval_primitive(op: str, args: List[float]) -> Number:
    return Number(arithmetic.eval_arithmetic(op, args))
