"""Tool definition for skills."""

import inspect
import json
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel


@dataclass(frozen=True)
class Tool:
    """A named callable the main agent can invoke once its skill is loaded.

    Tool names are the merge key of the agent's tool set: two tools with the
    same name never coexist there.

    Attributes:
        name: Identifier the model uses to call the tool.
        description: Human-readable description shown to the model.
        function: Sync or async callable receiving the validated fields as
            keyword arguments.
        input_schema: Pydantic model describing the arguments.
    """

    name: str
    description: str
    function: Callable[..., Any]
    input_schema: type[BaseModel]

    def validate(self, arguments: Mapping[str, Any]) -> dict[str, Any]:
        """Validate raw arguments and return them as keyword arguments.

        Raises:
            pydantic.ValidationError: If arguments do not match input_schema.
        """
        return self.input_schema.model_validate(dict(arguments)).model_dump()

    async def aexecute(self, **kwargs: Any) -> Any:
        """Call the function with validated arguments, awaiting async ones."""
        result = self.function(**self.validate(kwargs))
        if inspect.isawaitable(result):
            result = await result
        return result

    async def run(self, arguments: Mapping[str, Any]) -> str:
        """Execute the tool and render its result as tool-message text.

        Non-string results are serialized as JSON.
        """
        result = await self.aexecute(**arguments)
        if isinstance(result, str):
            return result
        return json.dumps(result, indent=2, default=str)

    def to_langchain_tool(self) -> dict[str, Any]:
        """Function schema in the shape accepted by ``bind_tools``."""
        return {
            "name": self.name,
            "description": self.description,
            "parameters": self.input_schema.model_json_schema(),
        }
