from typing import List, Optional

from pydantic import BaseModel, Field

from tourney_store.models.message_model import ChatMessage
from tourney_store.models.payment_model import PaymentRequest
from tourney_store.models.settings_model import AppSettings
from tourney_store.models.tournament_model import Tournament
from tourney_store.models.user_model import User

class StoreState(BaseModel):
    """
    One complete snapshot of the application state.

    Snapshots are never changed in place: every mutation builds a new
    StoreState with ``model_copy(update=...)`` so a reader holding an older
    snapshot always sees a consistent value.
    """
    current_user: Optional[User] = None
    users: List[User] = Field(default_factory=list)
    tournaments: List[Tournament] = Field(default_factory=list)
    payments: List[PaymentRequest] = Field(default_factory=list)
    settings: AppSettings = Field(default_factory=AppSettings)
    messages: List[ChatMessage] = Field(default_factory=list)

    class Config:
        frozen = True

    def find_user(self, user_id: str) -> Optional[User]:
        return next((u for u in self.users if u.id == user_id), None)

    def find_tournament(self, tournament_id: str) -> Optional[Tournament]:
        return next((t for t in self.tournaments if t.id == tournament_id), None)

    def find_payment(self, payment_id: str) -> Optional[PaymentRequest]:
        return next((p for p in self.payments if p.id == payment_id), None)

    def with_user(self, user: User) -> "StoreState":
        """
        Return a snapshot where ``user`` replaces the record with the same id.
        If that user is logged in, the session copy is replaced as well so it
        never drifts from the collection.
        """
        users = [user if u.id == user.id else u for u in self.users]
        current_user = self.current_user
        if current_user is not None and current_user.id == user.id:
            current_user = user
        return self.model_copy(update={"users": users, "current_user": current_user})
