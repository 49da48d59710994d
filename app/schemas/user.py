from datetime import datetime
from typing import Optional

from pydantic import EmailStr, Field

from app.schemas.common import ApiModel


class UserCreate(ApiModel):
    """Registration record handed over by the auth collaborator."""

    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)
    email: EmailStr
    name: str = Field(..., min_length=1)
    phone: Optional[str] = None


class UserOut(ApiModel):
    """Public view of a user; the credential never leaves the store."""

    id: int
    username: str
    email: str
    name: str
    phone: Optional[str] = None
    created_at: datetime
