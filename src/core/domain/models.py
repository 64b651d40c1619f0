"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- Strict validation and self-documenting fields (Field) without coupling
  the Core to I/O libraries.
- Results serialize straight to JSON for the CLI and for pipelines.

Note:
- These models describe *what* the operator submitted and *what* failed,
  not *how* the checks reach the broker or the lookup service.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict

KNOWN_ENTITY_TYPES: tuple[str, ...] = ("node", "media", "taxonomy_term")


class FieldKey(str, Enum):
    """Settings fields that can carry a validation failure."""

    BROKER_URL = "broker_url"
    JWT_EXPIRY = "jwt_expiry"
    GEMINI_URL = "gemini_url"


class FailureKind(str, Enum):
    BROKER_UNREACHABLE = "broker_unreachable"
    NOT_A_TIME_EXPRESSION = "not_a_time_expression"
    NEGATIVE_INTERVAL = "negative_interval"
    ZERO_MAGNITUDE = "zero_magnitude"
    NO_RECOGNIZED_UNIT = "no_recognized_unit"
    INVALID_URL = "invalid_url"
    SERVICE_UNREACHABLE = "service_unreachable"
    LOOKUP_URL_REQUIRED = "lookup_url_required"


class PseudoBundle(BaseModel):
    """A bundle/entity-type pair selected to display the Fedora URL field."""

    model_config = ConfigDict(frozen=True)

    bundle: str = Field(..., min_length=1, description="Bundle machine name (e.g. 'article').")
    entity_type: str = Field(..., min_length=1, description="Entity type (e.g. 'node').")

    @classmethod
    def from_identifier(cls, identifier: str) -> "PseudoBundle":
        """Parse a `"{bundle}:{entity_type}"` identifier."""

        bundle, sep, entity_type = identifier.strip().partition(":")
        if not sep or not bundle or not entity_type:
            raise ValueError(f"bundle identifier must look like 'bundle:entity_type', got {identifier!r}")
        return cls(bundle=bundle, entity_type=entity_type)

    @property
    def identifier(self) -> str:
        return f"{self.bundle}:{self.entity_type}"

    @property
    def is_known_entity_type(self) -> bool:
        return self.entity_type in KNOWN_ENTITY_TYPES


class SettingsInput(BaseModel):
    """Raw settings submitted by the operator.

    Transient: built per validation call and discarded afterwards.
    """

    model_config = ConfigDict(extra="ignore")

    broker_url: str = Field(
        default="",
        description="Message broker connection string (e.g. 'tcp://localhost:61613').",
    )
    jwt_expiry: str = Field(
        default="",
        description="Free-text interval expression (e.g. '2 days').",
    )
    gemini_url: str = Field(
        default="",
        description="Base URL of the Gemini lookup service (optional).",
    )
    selected_bundles: set[str] = Field(
        default_factory=set,
        description="Selected pseudo bundles as 'bundle:entity_type' identifiers.",
    )

    @field_validator("broker_url", "jwt_expiry", "gemini_url", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("selected_bundles", mode="before")
    @classmethod
    def _filter_unchecked(cls, value: Any) -> Any:
        # Checkbox mappings keep unchecked options with a falsy value.
        if value is None:
            return set()
        if isinstance(value, dict):
            value = [key for key, checked in value.items() if checked]
        if isinstance(value, str):
            value = [value]
        if not isinstance(value, (list, set, frozenset, tuple)):
            raise ValueError("selected_bundles must be a list or a mapping")
        cleaned: set[str] = set()
        for item in value:
            if not item:
                continue
            text = str(item).strip()
            if not text:
                continue
            PseudoBundle.from_identifier(text)
            cleaned.add(text)
        return cleaned

    def pseudo_bundles(self) -> list[PseudoBundle]:
        """Selected bundles, parsed and sorted by identifier."""

        return [PseudoBundle.from_identifier(item) for item in sorted(self.selected_bundles)]


class TimeInterval(BaseModel):
    """A validated expiry: positive magnitude plus a recognized unit."""

    model_config = ConfigDict(frozen=True)

    magnitude: int = Field(..., gt=0, description="Leading integer of the expression.")
    unit: str = Field(..., min_length=1, description="Canonical unit token (e.g. 'hour').")
    expression: str = Field(..., min_length=1, description="Normalized expression (trimmed, lower-cased).")


class ValidationFailure(BaseModel):
    model_config = ConfigDict(frozen=True)

    field: FieldKey
    kind: FailureKind
    message: str = Field(..., min_length=1)


class ValidationResult(BaseModel):
    """Ordered field-level failures. Empty means valid."""

    failures: list[ValidationFailure] = Field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.failures

    def for_field(self, field: FieldKey) -> list[ValidationFailure]:
        return [failure for failure in self.failures if failure.field == field]

    def messages(self) -> list[tuple[str, str]]:
        """`(field_key, message)` pairs in failure order."""

        return [(failure.field.value, failure.message) for failure in self.failures]
