"""
Helpers for removing __typename from request variables.

Responses cached by a GraphQL client carry "__typename" on every object. When
those objects are reused as input variables the server rejects the extra
field, so it has to be stripped before the operation is sent.
"""

import logging
from enum import Enum
from typing import Any, Hashable, Mapping, Optional

from .core import omit_deep
from .operation import Operation
from .parser import parse_variable_definitions
from .signals import BREAK, Path

logger = logging.getLogger(__name__)

TYPENAME = "__typename"


class _Marker(Enum):
    KEEP = "keep"


KEEP = _Marker.KEEP
"""Marks a type or field in remove_typename_from_variables' except_ config
whose value must be sent exactly as given."""


def strip_typename(value: Any) -> Any:
    """Remove "__typename" at every depth (see omit_deep)."""
    return omit_deep(value, TYPENAME)


def remove_typename_from_variables(
    operation: Operation, except_: Optional[Mapping[str, Any]] = None
) -> Operation:
    """
    Return the operation with "__typename" removed from its variables.

    Args:
        operation: The operation to prepare
        except_: Optional config keyed by GraphQL input type name. A type mapped
                 to KEEP is sent untouched wherever a variable of that type
                 appears; a type mapped to a dict applies the same rule to
                 its fields, e.g. {"JSON": KEEP, "UserInput": {"meta": KEEP}}.

    Returns:
        The same operation if nothing was removed, otherwise a copy with the
        new variables.
    """
    if not operation.variables:
        logger.debug(
            "Operation %r has no variables, nothing to strip", operation.operation_name
        )
        return operation

    if except_ is None:
        variables = strip_typename(operation.variables)
    else:
        policy = ExceptPolicy(except_, parse_variable_definitions(operation.query))
        variables = omit_deep(operation.variables, TYPENAME, keep=policy)

    if variables is operation.variables:
        return operation

    return operation.model_copy(update={"variables": variables})


class ExceptPolicy:
    """
    Keep policy answering BREAK for variable paths configured as KEEP.

    The first path element (the variable name) is replaced by the variable's
    declared type, list indices are skipped, and the remaining field names are
    looked up in the config.
    """

    def __init__(self, config: Mapping[str, Any], variable_types: Mapping[str, str]):
        self.config = config
        self.variable_types = variable_types
        self._untyped: set[Hashable] = set()

    def decide(self, path: Path, key: Hashable) -> Any:
        type_name = self.variable_types.get(path[0])  # type: ignore[arg-type]
        if type_name is None:
            if path[0] not in self._untyped:
                self._untyped.add(path[0])
                logger.debug("Variable %r has no declared type, stripping it", path[0])
            return None

        current = self.config.get(type_name)
        for segment in path[1:]:
            if current is KEEP:
                break
            if isinstance(segment, int):
                continue
            if not isinstance(current, Mapping):
                return None
            current = current.get(segment)

        return BREAK if current is KEEP else None
