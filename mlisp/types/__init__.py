from mlisp.types.symbol import Symbol
from mlisp.types.environment import Environment
from mlisp.types.lisp_set import LispSet, value_key
from mlisp.types.builtin_fn import NativeFunction
from mlisp.types.lambda_fn import Lambda

__all__ = ["Symbol", "Environment", "LispSet", "value_key", "NativeFunction", "Lambda"]
