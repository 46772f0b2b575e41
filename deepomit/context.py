"""
Context manager for omission configuration.

Strict mode decides what omit_deep does with a keep-policy answer it does not
recognise. Recognised answers are None, True/False and KeepSignal members;
anything else is treated as "no opinion" by default, and raises TypeError
in strict mode so a policy returning e.g. a truthy string is caught early.
The flag is read once when omit_deep starts, so changing it from inside a
policy has no effect on the running call.
"""

from contextlib import contextmanager
from contextvars import ContextVar

# Context variable for strict mode
_strict_mode: ContextVar[bool] = ContextVar("strict_mode", default=False)


def is_strict() -> bool:
    """Check if strict mode is currently enabled."""
    return _strict_mode.get()


@contextmanager
def omit_context(*, strict: bool = False):
    """
    Context manager for omission configuration.

    Args:
        strict: If True, omit_deep() raises TypeError when a keep policy
               answers with something other than None, a bool or a
               KeepSignal, instead of falling back to the default.

    Example:
        from deepomit import omit_deep, omit_context

        def keep(path):
            return "yes" if path == ("meta",) else None  # Not a valid answer

        # Normal — "yes" is ignored, "meta" is processed as usual
        result = omit_deep(data, "__typename", keep=keep)

        # Strict — raises TypeError
        with omit_context(strict=True):
            omit_deep(data, "__typename", keep=keep)  # TypeError!
    """
    token = _strict_mode.set(strict)
    try:
        yield
    finally:
        _strict_mode.reset(token)
