import io
import logging
import textwrap

import pytest

from mlisp.__main__ import main
from mlisp.config import Config
from mlisp.interpreter import Interpreter
from mlisp.types import errors


def write_source(tmp_path, text):
    path = tmp_path / "program.lisp"
    path.write_text(textwrap.dedent(text), encoding="utf-8")
    return path


PROGRAM = """
    (define x 7.2)
    (fn plus a b (+ a b))
    (plus 3 4)
    (if (< x 10) '(1 2) {3 3})
"""


def test_eval_returns_each_result(interp):
    assert interp.eval("(define x 2) (* x 3)") == [2.0, 6.0]
    assert interp.eval("x") == [2.0]


def test_eval_term_pairs_expression_and_value(interp):
    [(expr, value)] = interp.eval_term("(+ 3 4)")
    assert value == 7.0


def test_eval_term_logs_at_debug(interp, caplog):
    caplog.set_level(logging.DEBUG, logger="mlisp.interpreter")
    interp.eval_term("(+ 3 4)")
    assert "(+ 3 4) -> 7" in caplog.text


def test_runaway_recursion_is_an_eval_error(interp):
    interp.eval("(fn loop n (loop n))")
    with pytest.raises(errors.DefaultError):
        interp.eval("(loop 1)")


def test_run_file_prints_every_result(tmp_path, interp):
    out = io.StringIO()
    failures = interp.run_file(write_source(tmp_path, PROGRAM), out=out)
    assert failures == 0
    assert out.getvalue() == "7.2\ntrue\n7\n(1 2)\n"


def test_run_file_stops_at_first_error(tmp_path, interp):
    path = write_source(tmp_path, """
        (define a 1)
        (undefined 2)
        (+ a 1)
    """)
    out = io.StringIO()
    assert interp.run_file(path, out=out) == 1
    assert out.getvalue() == "1\n"


def test_run_file_keep_going(tmp_path):
    path = write_source(tmp_path, """
        (define a 1)
        (undefined 2)
        (if 1 2 3)
        (+ a 1)
    """)
    out = io.StringIO()
    interp = Interpreter(Config(keep_going=True))
    assert interp.run_file(path, out=out) == 2
    assert out.getvalue() == "1\n2\n"


def test_run_file_reader_error_is_fatal(tmp_path, interp, caplog):
    path = write_source(tmp_path, "(define a 1)\n(+ a 1\n")
    out = io.StringIO()
    assert interp.run_file(path, out=out) == 1
    assert out.getvalue() == ""
    assert "Missing symbol" in caplog.text


def test_config_from_env():
    config = Config.from_env({"MLISP_LOG_LEVEL": "DEBUG", "MLISP_KEEP_GOING": "1"})
    assert config.log_level == "debug"
    assert config.keep_going is True
    assert Config.from_env({}) == Config()


def test_config_rejects_unknown_level():
    with pytest.raises(ValueError):
        Config(log_level="verbose")


def test_cli_runs_file(tmp_path, capsys, monkeypatch):
    monkeypatch.delenv("MLISP_LOG_LEVEL", raising=False)
    monkeypatch.delenv("MLISP_KEEP_GOING", raising=False)
    path = write_source(tmp_path, PROGRAM)
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == "7.2\ntrue\n7\n(1 2)\n"


def test_cli_reports_failure(tmp_path, capsys, monkeypatch):
    monkeypatch.delenv("MLISP_KEEP_GOING", raising=False)
    path = write_source(tmp_path, "(head 1)\n(+ 1 1)\n")
    assert main([str(path)]) == 1
    assert capsys.readouterr().out == ""
    assert main([str(path), "--keep-going"]) == 1
    assert capsys.readouterr().out == "2\n"


def test_cli_missing_file(tmp_path):
    assert main([str(tmp_path / "nope.lisp")]) == 1


def test_cli_rejects_unknown_log_level(tmp_path):
    with pytest.raises(SystemExit) as exc:
        main([str(tmp_path / "x.lisp"), "--log-level", "verbose"])
    assert exc.value.code == 2


def test_deeply_nested_term_is_an_ordinary_failure(tmp_path):
    path = tmp_path / "deep.lisp"
    path.write_text("(" * 3000 + "+ 1 2" + ")" * 3000 + "\n(+ 1 1)\n", encoding="utf-8")
    out = io.StringIO()
    interp = Interpreter(Config(keep_going=True))
    assert interp.run_file(path, out=out) == 1
    assert out.getvalue() == "2\n"


def test_eval_term_deep_nesting_raises_default_error(interp):
    with pytest.raises(errors.DefaultError):
        interp.eval_term("(" * 3000 + ")" * 3000)


def test_run_file_undecodable_source(tmp_path, interp, caplog):
    path = tmp_path / "bad.lisp"
    path.write_bytes(b"(+ 1 2)\n\xff\xfe\n")
    out = io.StringIO()
    assert interp.run_file(path, out=out) == 1
    assert out.getvalue() == ""
    assert "bad.lisp" in caplog.text


def test_cli_undecodable_source(tmp_path, monkeypatch):
    monkeypatch.delenv("MLISP_LOG_LEVEL", raising=False)
    path = tmp_path / "bad.lisp"
    path.write_bytes(b"\xff\xfe")
    assert main([str(path)]) == 1


def test_run_file_spaced_quote(tmp_path, interp):
    out = io.StringIO()
    assert interp.run_file(write_source(tmp_path, "' (1 2)\n'\n(3)\n"), out=out) == 0
    assert out.getvalue() == "(1 2)\n(3)\n"


def test_run_file_print_shares_output_stream(tmp_path, interp, capsys):
    out = io.StringIO()
    assert interp.run_file(write_source(tmp_path, "(print 5)\n(+ 1 1)\n"), out=out) == 0
    assert out.getvalue() == "5\n5\n2\n"
    assert capsys.readouterr().out == ""


def test_eval_term_renders_only_for_debug(interp, caplog, monkeypatch):
    def fail(_):
        raise AssertionError("rendered without debug logging")

    caplog.set_level(logging.WARNING, logger="mlisp.interpreter")
    monkeypatch.setattr("mlisp.interpreter.display", fail)
    [(_, value)] = interp.eval_term("(+ 3 4)")
    assert value == 7.0


def test_config_explicit_settings_skip_env():
    env = {"MLISP_LOG_LEVEL": "verbose", "MLISP_KEEP_GOING": "1"}
    config = Config.from_env(env, log_level="info", keep_going=False)
    assert config == Config(log_level="info", keep_going=False)
    with pytest.raises(ValueError):
        Config.from_env(env)


def test_cli_flag_overrides_bad_env_level(tmp_path, monkeypatch):
    monkeypatch.setenv("MLISP_LOG_LEVEL", "verbose")
    monkeypatch.delenv("MLISP_KEEP_GOING", raising=False)
    path = write_source(tmp_path, "(+ 1 1)\n")
    assert main([str(path), "--log-level", "none"]) == 0
    assert main([str(path)]) == 2
