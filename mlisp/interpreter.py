from __future__ import annotations
import logging
import sys
from contextlib import contextmanager, redirect_stdout
from pathlib import Path
from typing import Iterator, TextIO

from mlisp import SExpression, LispValue
from mlisp.config import Config
from mlisp.printer import display
from mlisp.reader.tokenizer import tokenize
from mlisp.reader.parser import parse_all
from mlisp.reader.term_reader import read_terms
from mlisp.types.environment import Environment
from mlisp.types.errors import DefaultError, LispError, ReaderError
from mlisp.evaluation.evaluator import evaluate
from mlisp.builtin.env_builtin import default_env

logger = logging.getLogger(__name__)


@contextmanager
def stack_guard() -> Iterator[None]:
    """Report Python stack exhaustion as an evaluation error."""
    try:
        yield
    except RecursionError as e:
        raise DefaultError("Maximum recursion depth exceeded") from e


class Interpreter:
    """
    Reads and evaluates mlisp code against one long-lived Environment.
    Definitions made by one call are visible to the next.
    """

    def __init__(self, config: Config | None = None, env: Environment | None = None):
        self.config: Config = config if config is not None else Config()
        self.env: Environment = env if env is not None else default_env()

    def evaluate(self, expr: SExpression) -> LispValue:
        with stack_guard():
            return evaluate(expr, self.env)

    def eval(self, code: str) -> list[LispValue]:
        """Evaluate every form in `code`, returning their values in order."""
        with stack_guard():
            return [evaluate(expr, self.env) for expr in parse_all(tokenize(code))]

    def eval_term(self, term: str) -> list[tuple[SExpression, LispValue]]:
        """Evaluate one term read from a source file.

        A term normally holds a single form; each form found is evaluated in
        turn and paired with its value.
        """
        results = []
        with stack_guard():
            for expr in parse_all(tokenize(term)):
                value = evaluate(expr, self.env)
                if logger.isEnabledFor(logging.DEBUG):
                    logger.debug("%s -> %s", display(expr), display(value))
                results.append((expr, value))
        return results

    def run_file(self, path: str | Path, out: TextIO | None = None) -> int:
        """Interpret a source file, writing each result to `out`.

        Output of the `print` builtin goes to `out` too, so it stays in
        order with the results.

        Returns the number of failed terms. Without keep_going the run stops
        at the first failure; bracket errors and undecodable input always
        stop it because no term of the file can be trusted.
        """
        out = out if out is not None else sys.stdout
        path = Path(path)
        logger.info("reading %s", path)

        with path.open(encoding="utf-8") as f:
            try:
                terms = read_terms(f)
            except (ReaderError, UnicodeDecodeError) as e:
                logger.error("%s: %s", path, e)
                return 1

        logger.info("evaluating %d term(s)", len(terms))
        failures = 0
        with redirect_stdout(out):
            for index, term in enumerate(terms, start=1):
                try:
                    results = self.eval_term(term)
                    with stack_guard():
                        lines = [display(value) for _, value in results]
                except LispError as e:
                    failures += 1
                    logger.error("term %d %s: %s", index, _abbreviate(term), e)
                    if not self.config.keep_going:
                        break
                    continue
                for line in lines:
                    out.write(line + "\n")
        return failures


def _abbreviate(term: str, limit: int = 80) -> str:
    return term if len(term) <= limit else term[:limit - 3] + "..."
