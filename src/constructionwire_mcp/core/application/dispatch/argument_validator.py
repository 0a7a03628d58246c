from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from jsonschema import Draft202012Validator

from constructionwire_mcp.core.exceptions.validation_error import ValidationError
from constructionwire_mcp.core.value_objects.tool_definition import ToolDefinition


class ArgumentValidator:
    """Checks tool arguments against the tool's JSON input schema."""

    def __init__(self) -> None:
        self._validators: dict[str, Draft202012Validator] = {}

    def validate(self, definition: ToolDefinition, arguments: Mapping[str, Any]) -> None:
        validator = self._validators.get(definition.name)
        if validator is None:
            validator = Draft202012Validator(definition.input_schema)
            self._validators[definition.name] = validator

        errors = []
        for err in sorted(validator.iter_errors(dict(arguments)), key=str):
            location = "/".join(map(str, err.path))
            errors.append(f"{err.message} at path: {location}" if location else err.message)
        if errors:
            raise ValidationError(definition.name, errors)
