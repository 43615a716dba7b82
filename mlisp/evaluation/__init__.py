from mlisp.evaluation.evaluator import evaluate, call_function
from mlisp.evaluation.apply import apply, apply_lambda

__all__ = ["evaluate", "call_function", "apply", "apply_lambda"]
