# Core type aliases for mlisp's data model.
# Expressions and values are plain Python types where possible:
# bool for Boolean, float for Number, list for List, Symbol for symbols.
# Sets and callables get their own classes (see mlisp.types).
#
# Naming guidance:
# - SExpression: parser output, the code the evaluator walks.
# - LispValue:   evaluator output, the runtime values held by an Environment.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
# Parsed form alias
SExpression = Any

# Evaluator function type, passed to special forms and the apply engine
EvaluatorFn = Callable[..., LispValue]

__version__ = "0.1.0"

from mlisp.interpreter import Interpreter  # noqa: E402
from mlisp.builtin.env_builtin import default_env  # noqa: E402
from mlisp.evaluation.evaluator import evaluate  # noqa: E402
from mlisp.reader.tokenizer import tokenize  # noqa: E402
from mlisp.reader.parser import parse, parse_all  # noqa: E402
from mlisp.printer import display  # noqa: E402

__all__ = [
    "Interpreter",
    "default_env",
    "evaluate",
    "tokenize",
    "parse",
    "parse_all",
    "display",
    "LispValue",
    "SExpression",
    "EvaluatorFn",
]
