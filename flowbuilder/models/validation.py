"""Result model shared by the workflow and pipeline rule sets."""

from pydantic import BaseModel, Field


class ValidationResult(BaseModel):
    """Outcome of checking a graph against a rule set."""

    valid: bool
    """Whether every rule passed."""

    errors: list[str] = Field(default_factory=list)
    """Human-readable messages, one per violation, in rule order."""

    @classmethod
    def from_errors(cls, errors: list[str]) -> "ValidationResult":
        return cls(valid=not errors, errors=errors)
