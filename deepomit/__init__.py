from .context import is_strict, omit_context
from .core import omit_deep
from .decorator import omitting
from .operation import Operation
from .parser import parse_variable_definitions
from .signals import BREAK, KEEP_KEY, KeepPolicy, KeepSignal
from .typename import KEEP, remove_typename_from_variables, strip_typename

__all__ = [
    "omit_deep",
    "omitting",
    "omit_context",
    "is_strict",
    "BREAK",
    "KEEP_KEY",
    "KeepPolicy",
    "KeepSignal",
    "KEEP",
    "Operation",
    "parse_variable_definitions",
    "remove_typename_from_variables",
    "strip_typename",
]
