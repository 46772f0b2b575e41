"""
The @omitting decorator for stripping a key from a function's return value.
"""

from functools import wraps
from typing import Any, Callable, Hashable

from .core import omit_deep


def omitting(key: Hashable, *, keep: Any = None) -> Callable:
    """
    Decorator that removes a key from everything the decorated function returns.

    The return value is passed through omit_deep(result, key, keep=keep), so
    the same structural sharing and keep-policy rules apply.

        @omitting("__typename")
        def build_variables(user): ...

        @omitting("internal", keep=lambda path: path == ("debug", "internal"))
        def build_payload(d): ...

    Args:
        key: The key to remove at every depth
        keep: Optional keep policy forwarded to omit_deep

    Returns:
        Decorator applying the omission to the function's output.
    """
    if callable(key):
        raise TypeError("omitting() needs the key to remove, use @omitting('key')")

    def decorator(func: Callable) -> Callable:
        if not callable(func):
            raise TypeError(f"Expected a callable, got {type(func).__name__}")

        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            return omit_deep(func(*args, **kwargs), key, keep=keep)

        return wrapper

    return decorator
