from typing import List, Optional
import z3
from ..errors import SexpSyntaxError

def find_unmatched(text: str) -> Optional[int]:
    """
    Return the offset of the first parenthesis without a partner, or None.
    A closing paren with nothing open wins over opens left at the end.
    """
    stack: List[int] = []
    for pos, c in enumerate(text):
        if c == "(":
            stack.append(pos)
        elif c == ")":
            if not stack:
                return pos
            stack.pop()
    return stack[0] if stack else None

def check_delimiter_balance(text: str) -> bool:
    # 1. Nesting order check (simple stack)
    if find_unmatched(text) is not None:
        return False

    # 2. Count check using Z3 (always sat once the nesting scan passes)
    ctx = z3.Context()
    solver = z3.Solver(ctx=ctx)
    open_var = z3.Int("open", ctx=ctx)
    close_var = z3.Int("close", ctx=ctx)
    solver.add(open_var == text.count("("))
    solver.add(close_var == text.count(")"))
    solver.add(open_var == close_var)
    return solver.check() == z3.sat

def require_balanced(text: str):
    if check_delimiter_balance(text):
        return
    pos = find_unmatched(text)
    raise SexpSyntaxError(f"unmatched parenthesis: position {pos}", pos)
