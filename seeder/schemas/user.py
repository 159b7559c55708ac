"""
Pydantic schemas for documents stored in the "user" collection.
"""
from enum import Enum
from typing import Any, Dict, List

from pydantic import BaseModel, EmailStr, Field, field_validator, model_validator


class UserStatus(str, Enum):
    """User status enum."""
    ACTIVE = "active"
    INACTIVE = "inactive"


class UserDocument(BaseModel):
    """Schema for a user document."""
    username: str = Field(..., min_length=3, max_length=255, pattern=r"^[\w.]+$", description="Login name")
    email: EmailStr = Field(..., description="User email address")
    status: UserStatus = Field(UserStatus.ACTIVE, description="Account status")
    password_hash: str = Field(..., description="Pre-computed bcrypt hash")
    reset_password_hash: str = Field("", description="Pending reset token hash")
    access: Dict[str, List[str]] = Field(..., description="Allowed actions per resource")
    created: int = Field(..., ge=0, description="Creation time (Unix seconds)")
    modified: int = Field(..., ge=0, description="Last modification time (Unix seconds)")

    @field_validator("access")
    def validate_access(cls, v):
        """Require at least one resource."""
        if not v:
            raise ValueError("Access must grant at least one resource")
        return v

    @model_validator(mode="after")
    def validate_timestamps(self):
        """Modified can never precede created."""
        if self.modified < self.created:
            raise ValueError("modified must not be earlier than created")
        return self

    def to_document(self) -> Dict[str, Any]:
        """Return the mapping written to the document store."""
        return self.model_dump(mode="json")
