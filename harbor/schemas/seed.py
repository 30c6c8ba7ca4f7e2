"""Pydantic schemas for the legacy prototype seed object."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from harbor.importer.errors import ParseError


class LegacyRecord(BaseModel):
    """One loosely-typed account, deal or lead from the prototype."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", coerce_numbers_to_str=True)

    name: str | None = None
    contact: str | None = None
    email: str | None = None
    product: str | None = None
    source: str | None = None
    notes: str | None = None
    next_step: str | None = Field(None, alias="nextStep")
    billing_schedule: str | None = Field(None, alias="billingSchedule")

    # Left untyped; the normalizers decide what they accept
    follow_up_required: Any = Field(None, alias="followUpRequired")
    last_contact: Any = Field(None, alias="lastContact")
    status: Any = None
    stage: Any = None


class SeedPayload(BaseModel):
    """The three record categories carried by the seed object."""

    accounts: list[LegacyRecord] = Field(default_factory=list)
    deals: list[LegacyRecord] = Field(default_factory=list)
    leads: list[LegacyRecord] = Field(default_factory=list)

    @field_validator("accounts", "deals", "leads", mode="before")
    @classmethod
    def none_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    @classmethod
    def from_raw(cls, raw: dict[str, Any]) -> "SeedPayload":
        """Project a raw parsed seed object, defaulting missing categories."""
        try:
            return cls.model_validate(raw)
        except ValidationError as e:
            raise ParseError(f"Seed object has an unexpected shape: {e}") from e

    def counts(self) -> dict[str, int]:
        return {
            "accounts": len(self.accounts),
            "deals": len(self.deals),
            "leads": len(self.leads),
        }
