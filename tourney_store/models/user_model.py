from enum import Enum
from typing import List
from uuid import uuid4

from pydantic import BaseModel, Field

class Role(str, Enum):
    ADMIN = "ADMIN"
    PLAYER = "PLAYER"

class User(BaseModel):
    id: str = Field(default_factory=lambda: str(uuid4()))
    name: str
    phone: str
    email: str  # Free-form login ID; seeded accounts use plain names such as "admin"
    password_hash: str
    balance: int = 0  # May go negative after an approved withdrawal
    role: Role = Role.PLAYER
    joined_matches: List[str] = Field(default_factory=list)  # Tournament ids, no duplicates

    class Config:
        frozen = True
        use_enum_values = True
