from .checker import find_unmatched, check_delimiter_balance, require_balanced

__all__ = ["find_unmatched", "check_delimiter_balance", "require_balanced"]
