"""
Operation model for requests whose variables are prepared with omit_deep.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from .parser import parse_variable_definitions


class Operation(BaseModel):
    """A GraphQL operation about to be sent: document, variables and extensions."""

    model_config = ConfigDict(populate_by_name=True)

    query: str
    operation_name: Optional[str] = Field(default=None, alias="operationName")
    variables: Optional[dict[str, Any]] = None
    extensions: dict[str, Any] = Field(default_factory=dict)

    @property
    def variable_types(self) -> dict[str, str]:
        """Declared named type of each variable, e.g. {"user": "UserInput"}."""
        return parse_variable_definitions(self.query)

    def to_payload(self) -> dict[str, Any]:
        """Request body using the wire names (operationName)."""
        return self.model_dump(by_alias=True, exclude_none=True)
