"""Tool definitions shared by the media MCP server and its registry."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict

from pydantic import BaseModel, ConfigDict, ValidationError


class ToolParameters(BaseModel):
    """Base parameters schema for MCP tools."""

    model_config = ConfigDict(extra="forbid")


@dataclass
class ToolDefinition:
    """Description of a tool that can be registered with the server.

    Attributes:
        name: Unique name of the tool. Must match a name in the tool catalog
            for profile filtering to apply to it.
        description: Human-readable description of the tool purpose.
        parameters_model: Pydantic model used to validate input parameters.
        handler: Callable that executes the tool logic.
        output_schema: Optional JSON schema advertised for the tool output.
    """

    name: str
    description: str
    parameters_model: type[ToolParameters]
    handler: Callable[[Dict[str, Any]], Dict[str, Any]]
    output_schema: Dict[str, Any] = field(default_factory=dict)

    def validate(self, parameters: Dict[str, Any]) -> Dict[str, Any]:
        """Validate and coerce incoming tool parameters.

        Args:
            parameters: Input parameters provided for the tool.

        Raises:
            ValueError: If parameter validation fails.

        Returns:
            Validated parameter dictionary.
        """

        try:
            model = self.parameters_model.model_validate(parameters)
        except ValidationError as error:
            raise ValueError(f"Invalid parameters for tool '{self.name}'") from error
        return model.model_dump(by_alias=True, exclude_none=True)

    def metadata(self) -> Dict[str, Any]:
        """Return a discovery-friendly description of the tool."""

        return {
            "name": self.name,
            "description": self.description,
            "schema": self.parameters_model.model_json_schema(by_alias=True),
        }
