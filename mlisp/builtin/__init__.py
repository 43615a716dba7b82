from mlisp.builtin.env_builtin import BUILTINS, CONSTANTS, default_env, register

__all__ = ["BUILTINS", "CONSTANTS", "default_env", "register"]
