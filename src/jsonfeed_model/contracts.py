"""Public validation report models for jsonfeed_model."""

from typing import List, Optional
from pydantic import BaseModel, Field


class ValidationIssue(BaseModel):
    """A single reason a document does not comply with a revision."""
    code: str  # ValidationCode value, e.g. "MISSING_REQUIRED_FIELD"
    message: str
    path: str = ""  # JSON pointer to the entity or field, "" for the root
    key: Optional[str] = None  # Offending key, when the issue is about one field


class ValidationReport(BaseModel):
    """Outcome of validating one entity against a target revision."""
    ok: bool
    entity: str  # "Feed" | "Item" | "Author" | "Hub" | "Attachment"
    target_version: str
    issues: List[ValidationIssue] = Field(default_factory=list)  # sorted by (path, code)
