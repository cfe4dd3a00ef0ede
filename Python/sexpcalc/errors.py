from typing import Optional

class SexpError(Exception): pass

class SexpSyntaxError(SexpError):
    def __init__(self, msg: str, position: Optional[int] = None):
        super().__init__(msg)
        self.position = position

class EvalError(SexpError): pass

class UnboundSymbolError(EvalError):
    def __init__(self, name: str):
        super().__init__(f"unbound symbol: {name}")
        self.name = name
