import sys
import time
from typing import List, Optional

from . import parser, runtime, constraints
from .errors import SexpError
from .prelude import initial_bindings
from .runtime import evaluator as runtime_evaluator
from .syntax.ast import show_expr

DEFAULT_PROGRAM = "(+ 1 2 (* 3 4))"
OPTION_WORDS = ("debug", "check", "strict")

class DriverOptions:
    def __init__(self, input_path: Optional[str], debug: bool, check: bool, strict: bool):
        self.input_path = input_path
        self.debug = debug
        self.check = check
        self.strict = strict

    @staticmethod
    def from_args(args: List[str]) -> 'DriverOptions':
        options = set(args)
        input_path = next((a for a in args if a not in OPTION_WORDS), None)
        return DriverOptions(
            input_path=input_path,
            debug="debug" in options,
            check="check" in options,
            strict="strict" in options,
        )

def read_program(opts: DriverOptions) -> str:
    if opts.input_path is None:
        return DEFAULT_PROGRAM
    source = "<stdin>" if opts.input_path == "-" else opts.input_path
    try:
        if opts.input_path == "-":
            return sys.stdin.read()
        with open(opts.input_path, 'r', encoding='utf-8') as f:
            return f.read()
    except OSError as e:
        raise SexpError(f"failed to read {source}: {e.strerror or e}") from e
    except UnicodeDecodeError as e:
        raise SexpError(f"failed to read {source}: not valid UTF-8 ({e.reason} at byte {e.start})") from e

def run(opts: DriverOptions) -> str:
    """Parse and evaluate one program, returning the rendered result."""
    text = read_program(opts)

    if opts.debug:
        print("=== sexpcalc ===")
        print(f"Input: {opts.input_path or '<built-in>'}")
        print(f"Delimiter check: {'enabled' if opts.check else 'disabled'}")
        print(f"Environment: {' '.join(runtime.Env.initial(initial_bindings).names())}")
        print()

    if opts.check:
        constraints.require_balanced(text)

    parse_start = time.time() * 1000
    expr = parser.parse(text, debug=opts.debug)
    parse_end = time.time() * 1000
    if opts.debug:
        print(f"== Parsing ==\n  {expr!r}\n  Time: {int(parse_end - parse_start)}ms\n")

    result = runtime.eval_program(expr)
    if opts.debug:
        print(f"== Evaluation ==\n  Time: {int(time.time() * 1000 - parse_end)}ms\n")

    return show_expr(result)

def print_usage():
    print("""Usage:
  python -m sexpcalc [<input-file> | -] [options...]

Options:
  debug   - Trace parsing and evaluation
  check   - Verify parenthesis balance before parsing
  strict  - Exit with status 1 when an error is reported

Without an input file the built-in program (+ 1 2 (* 3 4)) is evaluated.
""")

def main(argv: Optional[List[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if "-h" in args or "--help" in args:
        print_usage()
        return 0

    opts = DriverOptions.from_args(args)
    if opts.debug:
        runtime_evaluator.DEBUG_EVAL = True

    try:
        rendered = run(opts)
    except SexpError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1 if opts.strict else 0
    finally:
        runtime_evaluator.DEBUG_EVAL = False

    print(f"Result: {rendered}")
    return 0

if __name__ == "__main__":
    sys.exit(main())
