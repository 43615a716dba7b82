"""Error taxonomy for mlisp.

Each pipeline stage raises from its own family: the term reader raises
ReaderError, the parser ParseError and the evaluator (including builtins)
EvalError. LispError only exists so that the driver can catch all three.
"""

from __future__ import annotations


class LispError(Exception):
    """ Base class for all mlisp errors"""


# -------------------------------
# Parser
# -------------------------------
class ParseError(LispError):
    """ Raised when a token sequence cannot be parsed"""


class EmptyInput(ParseError):
    """ Raised when parsing starts with no tokens left"""

    def __init__(self):
        super().__init__("Empty input")


class UnexpectedToken(ParseError):
    """ Raised when a token appears where it is not allowed"""

    def __init__(self, token: str):
        super().__init__(f"Unexpected token {token!r}")
        self.token = token


class UnexpectedExpression(ParseError):
    """ Raised when a sub-expression has the wrong shape"""

    def __init__(self):
        super().__init__("Unexpected expression")


class MissingToken(ParseError):
    """ Raised when tokens run out before a list is closed"""

    def __init__(self):
        super().__init__("Missing closing token")


# -------------------------------
# Evaluator
# -------------------------------
class EvalError(LispError):
    """ Raised when an expression cannot be evaluated"""


class UnknownSymbol(EvalError):
    """ Raised when a symbol is looked up before it is bound"""

    def __init__(self, name: str):
        super().__init__(f"Unknown symbol {name}")
        self.name = name


class UnexpectedEvalExpression(EvalError):
    """ Raised when a value has the right type but the wrong shape"""

    def __init__(self, message: str = "Unexpected expression"):
        super().__init__(message)


class InvalidNumberOfArguments(EvalError):
    """ Raised when a form or function receives the wrong number of arguments"""

    def __init__(self, message: str = "Invalid number of arguments"):
        super().__init__(message)


class InvalidArgumentType(EvalError):
    """ Raised when a builtin receives an argument of the wrong type"""

    def __init__(self, message: str = "Invalid argument type"):
        super().__init__(message)


class InvalidListExpression(EvalError):
    """ Raised for empty call forms and call forms with a literal head"""

    def __init__(self, message: str = "Invalid list expression"):
        super().__init__(message)


class InvalidIfStatement(EvalError):
    """ Raised when an if condition is not a boolean"""

    def __init__(self, message: str = "if condition must be a boolean"):
        super().__init__(message)


class InvalidFunctionCall(EvalError):
    """ Raised when the head symbol is bound to something that is not callable"""

    def __init__(self, name: str):
        super().__init__(f"{name} is not a function")
        self.name = name


class NonDefineInThisScope(EvalError):
    """ Raised when the head symbol of a call is not bound"""

    def __init__(self, name: str):
        super().__init__(f"{name} is not defined in this scope")
        self.name = name


class DefaultError(EvalError):
    """ Raised for evaluation failures with no more specific kind"""

    def __init__(self, message: str = "Evaluation failed"):
        super().__init__(message)


# -------------------------------
# Term reader
# -------------------------------
class ReaderError(LispError):
    """ Raised when the source text has unbalanced brackets"""

    def __init__(self, message: str, char: str):
        super().__init__(message)
        self.char = char


class UnexpectedSymbol(ReaderError):
    """ Raised when a closing bracket has no matching opener"""

    def __init__(self, char: str):
        super().__init__(f"Unexpected symbol {char!r}", char)


class MissingSymbol(ReaderError):
    """ Raised when the input ends with unclosed brackets"""

    def __init__(self, char: str):
        super().__init__(f"Missing symbol {char!r}", char)
