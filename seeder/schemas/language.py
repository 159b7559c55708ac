"""
Pydantic schemas for documents stored in the "language" collection.
"""
from typing import Any, Dict

from pydantic import BaseModel, Field


class LanguageDocument(BaseModel):
    """Schema for a language document."""
    title: str = Field(..., min_length=1, description="Display name")
    locale: str = Field(..., pattern=r"^\w+$", description="Locale code, e.g. en")
    created: int = Field(..., ge=0)
    modified: int = Field(..., ge=0)

    def to_document(self) -> Dict[str, Any]:
        """Return the mapping written to the document store."""
        return self.model_dump(mode="json")
