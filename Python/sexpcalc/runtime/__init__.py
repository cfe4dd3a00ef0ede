from .types import Value, Void, VOID, Env
from .evaluator import eval_program, eval_expr, evaluate

__all__ = ["Value", "Void", "VOID", "Env", "eval_program", "eval_expr", "evaluate"]
