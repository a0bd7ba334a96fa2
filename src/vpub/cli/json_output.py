"""JSON output for CLI commands with machine-parseable output."""

import json

from pydantic import BaseModel, ConfigDict, Field

from vpub.core.output import machine_output


class PublishCommandResponse(BaseModel):
    """JSON response schema for `vpub publish --json`.

    Attributes:
        name: Published package name
        version: Published version
        registry_url: Registry the package was published to
        browser_opened: Whether the registry UI was launched
        dry_run: Whether npm publish was only simulated
    """

    model_config = ConfigDict(strict=True)

    name: str
    version: str
    registry_url: str
    browser_opened: bool
    dry_run: bool


class ErrorResponse(BaseModel):
    """Pydantic model for error JSON responses.

    Attributes:
        error: Error message
        error_type: Error class name (e.g., "DuplicateVersionError")
        exit_code: Exit code for the process
    """

    model_config = ConfigDict(strict=True)

    error: str
    error_type: str
    exit_code: int = Field(default=1, ge=0, le=255)


def emit_json(model: BaseModel) -> None:
    """Write a model to stdout as a single JSON document."""
    machine_output(json.dumps(model.model_dump(mode="json"), indent=2))
