from ..syntax.ast import Symbol
from . import arithmetic, primitives

OPERATORS = ("+", "-", "*", "/")

# Each operator name is bound to a symbol carrying its own name
initial_bindings = {}
for op in OPERATORS:
    initial_bindings[op] = Symbol(op)

eval_primitive = primitives.eval_primitive
