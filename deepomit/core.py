"""
Core omit_deep function for deepomit key removal.
"""

from typing import Any, Callable, Hashable

from .lib.core_helpers import extend, is_plain_mapping, is_sequence, to_decider
from .signals import BREAK, KeepSignal, Path

Decider = Callable[[Path], KeepSignal] | None


def omit_deep(value: Any, key: Hashable, keep: Any = None) -> Any:
    """
    Remove every occurrence of a key from nested dicts and lists.

    Args:
        value: Data to process (any value; only dicts, lists and tuples are opened)
        key: The dict key to remove at every depth
        keep: Optional keep policy, either keep(path) or an object with
              decide(path, key). See KeepSignal for the accepted answers.

    Returns:
        A new structure without the key. Subtrees that did not change are
        returned as the same objects, so if the key never occurs the input
        itself is returned. The input is never mutated.

    Raises:
        TypeError: In strict mode, if the keep policy gives an invalid answer

    Note:
        Only exact dict, list and tuple instances are traversed. Anything else
        (class instances, pydantic models, dict subclasses, sets) is returned
        untouched, even if it has an attribute or key with the same name.
        Shared and cyclic references are transformed once and stay shared in
        the output. Recursion follows nesting depth, so acyclic data nested
        deeper than sys.getrecursionlimit() raises RecursionError.

    Examples:
        omit_deep({"omit": 1, "keep": 2}, "omit")           # {"keep": 2}
        omit_deep(variables, "__typename")
        omit_deep(data, "omit", keep=lambda path: path == ("meta", "omit"))
        omit_deep(data, "omit", keep=lambda path: BREAK if path == ("raw",) else None)
    """
    return _omit_value(value, key, (), _Memo(), to_decider(keep))


omit_deep.BREAK = BREAK  # type: ignore[attr-defined]


class _PendingTuple:
    """Stands in for a tuple whose elements are still being processed."""

    __slots__ = ("used",)

    def __init__(self):
        self.used = False


class _Memo:
    """
    Per-call table from input container id() to its output.

    Also records every list/dict rebuilt during the call, so a tuple placeholder
    handed out on a cycle can be swapped for the finished tuple.
    """

    def __init__(self):
        self.outputs: dict[int, Any] = {}
        self.rebuilt: list[list | dict] = []

    def lookup(self, value: Any) -> Any:
        found = self.outputs[id(value)]
        if isinstance(found, _PendingTuple):
            found.used = True
        return found

    def resolve_pending(self, pending: _PendingTuple, since: int, final: tuple) -> None:
        if not pending.used:
            return
        for container in self.rebuilt[since:]:
            if type(container) is list:
                for index, item in enumerate(container):
                    if item is pending:
                        container[index] = final
            else:
                for k, item in list(container.items()):
                    if item is pending:
                        container[k] = final


def _omit_value(value: Any, key: Hashable, path: Path, memo: _Memo, decider: Decider) -> Any:
    if is_plain_mapping(value):
        return _omit_mapping(value, key, path, memo, decider)

    if is_sequence(value):
        return _omit_sequence(value, key, path, memo, decider)

    return value


def _omit_mapping(
    mapping: dict, key: Hashable, path: Path, memo: _Memo, decider: Decider
) -> dict:
    """Process a dict, dropping the key and rebuilding only if something changed."""
    if id(mapping) in memo.outputs:
        return memo.lookup(mapping)

    # Registered before descent so cycles resolve to the in-progress result
    result: dict = {}
    memo.outputs[id(mapping)] = result
    modified = False

    for k, v in mapping.items():
        child_path = extend(path, k)
        signal = decider(child_path) if decider is not None else KeepSignal.REMOVE

        if signal is KeepSignal.BREAK:
            result[k] = v
            continue

        if k == key and signal is not KeepSignal.KEEP_KEY:
            modified = True
            continue

        processed = _omit_value(v, key, child_path, memo, decider)
        modified = modified or processed is not v
        result[k] = processed

    if not modified:
        memo.outputs[id(mapping)] = mapping
        return mapping

    memo.rebuilt.append(result)
    return result


def _omit_sequence(
    seq: list | tuple, key: Hashable, path: Path, memo: _Memo, decider: Decider
) -> list | tuple:
    """Process a list or tuple element-wise, rebuilding only if an element changed."""
    if id(seq) in memo.outputs:
        return memo.lookup(seq)

    # Tuples can't be filled in later, so cycles get a placeholder patched at the end
    is_list = type(seq) is list
    result: list = []
    pending = _PendingTuple()
    since = len(memo.rebuilt)
    memo.outputs[id(seq)] = result if is_list else pending
    items = []
    modified = False

    for index, item in enumerate(seq):
        item_path = extend(path, index)

        if decider is not None and decider(item_path) is KeepSignal.BREAK:
            items.append(item)
            continue

        processed = _omit_value(item, key, item_path, memo, decider)
        modified = modified or processed is not item
        items.append(processed)

    if not modified:
        memo.outputs[id(seq)] = seq
        return seq

    if not is_list:
        final = tuple(items)
        memo.outputs[id(seq)] = final
        memo.resolve_pending(pending, since, final)
        return final

    result.extend(items)
    memo.rebuilt.append(result)
    return result
