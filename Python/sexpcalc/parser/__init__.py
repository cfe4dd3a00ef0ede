from .main import parse
from .engine import Parser

__all__ = ["parse", "Parser"]
