from typing import List
from ..syntax import ast
from ..errors import SexpSyntaxError

def is_digit(c: str) -> bool:
    return len(c) == 1 and "0" <= c <= "9"

class Parser:
    """
    Single-pass recursive descent reader with one character of lookahead.

    Each call to parse() reads exactly one expression and leaves `index`
    just past the text it consumed.
    """

    def __init__(self, text: str, debug: bool = False):
        self.text = text
        self.index = 0
        self.debug = debug

    def log(self, msg: str):
        if self.debug:
            print(f"[PARSE] {msg}")

    def at_end(self) -> bool:
        return self.index >= len(self.text)

    def current(self) -> str:
        return self.text[self.index]

    def peek(self, offset: int = 1) -> str:
        pos = self.index + offset
        return self.text[pos] if pos < len(self.text) else ""

    def skip_whitespace(self):
        while not self.at_end() and self.current().isspace():
            self.index += 1

    def parse(self) -> ast.Expr:
        self.skip_whitespace()
        if self.at_end():
            raise SexpSyntaxError("unexpected end of input", self.index)

        c = self.current()
        if c == "(":
            return self.parse_list()
        if is_digit(c) or (c == "-" and is_digit(self.peek())):
            return self.parse_number()
        return self.parse_symbol()

    def parse_list(self) -> ast.ListExpr:
        start = self.index
        self.index += 1
        self.log(f"open list @{start}")
        items: List[ast.Expr] = []
        while True:
            self.skip_whitespace()
            if self.at_end():
                raise SexpSyntaxError(
                    f"unmatched parenthesis: list opened at position {start} is never closed", start)
            if self.current() == ")":
                break
            items.append(self.parse())
        self.index += 1
        self.log(f"close list @{self.index - 1} ({len(items)} items)")
        return ast.ListExpr(tuple(items))

    def parse_number(self) -> ast.Number:
        start = self.index
        if self.current() == "-":
            self.index += 1
        seen_point = False
        while not self.at_end():
            c = self.current()
            if is_digit(c):
                self.index += 1
            elif c == "." and not seen_point:
                seen_point = True
                self.index += 1
            else:
                break
        lexeme = self.text[start:self.index]
        self.log(f"number {lexeme} @{start}")
        return ast.Number(float(lexeme))

    def parse_symbol(self) -> ast.Symbol:
        start = self.index
        while not self.at_end():
            c = self.current()
            if c.isspace() or c in "()":
                break
            self.index += 1
        name = self.text[start:self.index]
        if not name:
            # Only a stray ')' stops a symbol before its first character
            raise SexpSyntaxError(f"unmatched parenthesis: unexpected ')' at position {start}", start)
        self.log(f"symbol {name} @{start}")
        return ast.Symbol(name)
