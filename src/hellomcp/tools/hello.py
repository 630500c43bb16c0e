"""HelloTool: greets the user by name."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ValidationError

from hellomcp.tools.base import INVALID_ARGUMENTS, ContentItem, text_content


class HelloArguments(BaseModel):
    value: str = "World"
    birthday: str = ""


class HelloTool:
    """A tool that greets users, optionally mentioning their birthday."""

    @property
    def name(self) -> str:
        return "HelloTool"

    def describe(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": "A tool that greets users",
            "inputSchema": {
                "type": "object",
                "properties": {
                    "value": {"type": "string", "description": "User name to greet"},
                    "birthday": {"type": "string", "description": "User's birthday"},
                },
                "required": ["value"],
            },
        }

    def call(self, arguments: str) -> list[ContentItem]:
        try:
            args = HelloArguments.model_validate_json(arguments)
        except ValidationError:
            return text_content(INVALID_ARGUMENTS)

        user = args.value
        if args.birthday:
            user += f" (born on {args.birthday})"
        return text_content(f"Hello {user}!")
