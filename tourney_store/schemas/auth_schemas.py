from typing import Optional

from pydantic import BaseModel, Field

class RegistrationRequest(BaseModel):
    # Format checks on phone/email are left to the form that collects them
    id: Optional[str] = None  # Generated when not supplied
    name: str = Field(min_length=1)
    phone: str = Field(min_length=1)
    email: str = Field(min_length=1)
    password: str = Field(min_length=1)
