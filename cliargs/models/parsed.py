from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ParsedArgs(BaseModel):
    """Commands, options and malformed tokens found in an argument list."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    commands: list[str] = Field(default_factory=list, alias="COMMANDS")
    options: dict[str, str] = Field(default_factory=dict, alias="OPTIONS")
    errors: list[str] = Field(default_factory=list, alias="ERRORS")

    @property
    def ok(self) -> bool:
        return not self.errors

    def as_dict(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)
