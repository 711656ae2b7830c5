"""Rule configuration."""

from pydantic import BaseModel, ConfigDict, Field


class RuleConfig(BaseModel):
    """Options of the no-dead-link rule.

    Accepts the snake_case field names as well as the camelCase keys used in
    rule configuration files (``checkRelative``, ``baseURI``). Unknown keys are
    ignored.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)

    check_relative: bool = Field(False, alias="checkRelative", description="Check relative URIs")
    base_uri: str | None = Field(None, alias="baseURI", description="Base URI to resolve relative URIs against")
    ignore: list[str] = Field(default_factory=list, description="URIs to skip (exact match)")
