from typing import Optional, Protocol

from passlib.context import CryptContext

from tourney_store.core.config import settings
from tourney_store.models.user_model import Role, User

pwd_context = CryptContext(schemes=settings.PASSWORD_SCHEMES, deprecated="auto")

def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)

def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


class CredentialVerifier(Protocol):
    """
    Turns a plain password into a stored credential and checks a login attempt
    against it. The store never compares passwords itself, so the hashing
    scheme can change without touching the mutation functions.
    """

    def hash(self, password: str) -> str:
        ...

    def verify(self, password: str, stored: str) -> bool:
        ...


class PasslibVerifier:
    def __init__(self, context: Optional[CryptContext] = None):
        self.context = context or pwd_context

    def hash(self, password: str) -> str:
        return self.context.hash(password)

    def verify(self, password: str, stored: str) -> bool:
        if not stored:
            return False
        try:
            return self.context.verify(password, stored)
        except ValueError:
            # Stored value is not a hash any configured scheme recognises
            return False


def ensure_admin(acting_as: Optional[User]) -> None:
    """
    Optional guard for admin-only operations. Callers that already checked
    the role pass nothing; callers that want the store to check pass the
    acting user.
    """
    if acting_as is None:
        return
    if acting_as.role != Role.ADMIN:
        raise PermissionError("User is not authorized to perform this action")
