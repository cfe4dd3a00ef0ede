from ..syntax import ast
from .engine import Parser

def parse(text: str, debug: bool = False) -> ast.Expr:
    parser = Parser(text, debug=debug)
    return parser.parse()
