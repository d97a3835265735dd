from typing import List, Optional

from pydantic import BaseModel

from tourney_store.models.user_model import Role

class ProfileUpdate(BaseModel):
    """Fields a logged-in player may change on their own account."""
    name: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None  # Plain text; hashed before it reaches the User record

class AdminUserUpdate(ProfileUpdate):
    """Fields an admin may change on any account."""
    balance: Optional[int] = None
    role: Optional[Role] = None
    joined_matches: Optional[List[str]] = None

    class Config:
        use_enum_values = True
