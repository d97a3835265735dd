"""
The shared state handle used by the presentation layer.

A Store owns exactly one current StoreState. Every mutation runs under a
single lock: the mutation function computes a new snapshot from the current
one, the store swaps it in with one assignment, writes it to storage and
then tells subscribers. Failed or no-op mutations return the very same
snapshot object, and in that case nothing is written or broadcast.
"""
import logging
import threading
from collections import deque
from typing import Any, Callable, Deque, Dict, List, Optional, Union

from pydantic import ValidationError

from tourney_store.core.messages import get_message
from tourney_store.core.security import CredentialVerifier, PasslibVerifier
from tourney_store.models import (
    AppSettings,
    ChatMessage,
    MatchType,
    PaymentRequest,
    PaymentStatus,
    StoreState,
    Tournament,
    User,
)
from tourney_store.schemas import AdminUserUpdate, OperationResult, ProfileUpdate, RegistrationRequest
from tourney_store.services import (
    auth_service,
    message_service,
    payment_service,
    settings_service,
    tournament_service,
    user_service,
)
from tourney_store.services.persistence_service import JsonFileStorage, SnapshotStorage
from tourney_store.services.seed_service import build_default_state

logger = logging.getLogger(__name__)

Listener = Callable[[StoreState], None]


class Store:
    def __init__(
        self,
        storage: Optional[SnapshotStorage] = None,
        verifier: Optional[CredentialVerifier] = None,
        locale: Optional[str] = None,
    ):
        self.storage = storage if storage is not None else JsonFileStorage()
        self.verifier = verifier or PasslibVerifier()
        self.locale = locale
        self._lock = threading.RLock()
        self._listeners: List[Listener] = []
        # Snapshots committed but not yet delivered, oldest first
        self._pending: Deque[StoreState] = deque()
        self._broadcasting = False

        loaded = self.storage.load()
        if loaded is None:
            logger.info("No saved snapshot, starting from the default state")
            self._state = build_default_state(self.verifier)
            self.storage.save(self._state)
        else:
            self._state = loaded

    # --- Subscription ---

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call ``listener(new_state)`` after every committed change. Returns an unsubscribe function."""
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    def _commit(self, new_state: StoreState) -> None:
        if new_state is self._state:
            return
        self._state = new_state
        try:
            self.storage.save(new_state)
        except OSError:
            logger.exception("Could not persist snapshot")
            raise
        self._pending.append(new_state)
        if self._broadcasting:
            # A listener mutated the store; the running fan-out delivers this after the current snapshot
            return
        self._broadcasting = True
        try:
            while self._pending:
                snapshot = self._pending.popleft()
                for listener in list(self._listeners):
                    try:
                        listener(snapshot)
                    except Exception:
                        logger.exception("Snapshot listener %r failed", listener)
        finally:
            self._broadcasting = False

    # --- Read access ---

    @property
    def state(self) -> StoreState:
        """The current snapshot. Treat it as read-only; change state only through the mutation methods."""
        return self._state

    @property
    def current_user(self) -> Optional[User]:
        return self._state.current_user

    @property
    def users(self) -> List[User]:
        return list(self._state.users)

    @property
    def tournaments(self) -> List[Tournament]:
        return list(self._state.tournaments)

    @property
    def payments(self) -> List[PaymentRequest]:
        return list(self._state.payments)

    @property
    def settings(self) -> AppSettings:
        return self._state.settings

    @property
    def messages(self) -> List[ChatMessage]:
        return list(self._state.messages)

    def get_user(self, user_id: str) -> Optional[User]:
        return self._state.find_user(user_id)

    def get_tournament(self, tournament_id: str) -> Optional[Tournament]:
        return self._state.find_tournament(tournament_id)

    def conversation(self, user_a: str, user_b: str) -> List[ChatMessage]:
        return message_service.conversation(self._state, user_a, user_b)

    # --- Authentication & profile ---

    def login(self, identifier: str, password: str) -> OperationResult:
        with self._lock:
            new_state, result = auth_service.login(self._state, identifier, password, self.verifier, self.locale)
            self._commit(new_state)
            return result

    def register(self, candidate: Union[RegistrationRequest, Dict[str, Any]]) -> OperationResult:
        if not isinstance(candidate, RegistrationRequest):
            try:
                candidate = RegistrationRequest.model_validate(candidate)
            except ValidationError as e:
                logger.info("Rejected registration with missing fields: %s", [err["loc"] for err in e.errors()])
                return OperationResult(success=False, message=get_message("missing_fields", self.locale))
        with self._lock:
            new_state, result = auth_service.register(self._state, candidate, self.verifier, self.locale)
            self._commit(new_state)
            return result

    def logout(self) -> None:
        with self._lock:
            self._commit(auth_service.logout(self._state))

    def update_profile(self, updates: Union[ProfileUpdate, Dict[str, Any]]) -> None:
        with self._lock:
            self._commit(user_service.update_profile(self._state, updates, self.verifier))

    def admin_update_user(
        self,
        user_id: str,
        updates: Union[AdminUserUpdate, Dict[str, Any]],
        acting_as: Optional[User] = None,
    ) -> None:
        with self._lock:
            self._commit(user_service.admin_update_user(self._state, user_id, updates, self.verifier, acting_as))

    # --- Tournaments ---

    def add_tournament(self, tournament: Tournament) -> None:
        with self._lock:
            self._commit(tournament_service.add_tournament(self._state, tournament))

    def remove_tournament(self, tournament_id: str) -> None:
        with self._lock:
            self._commit(tournament_service.remove_tournament(self._state, tournament_id))

    def update_tournament(self, tournament: Tournament) -> None:
        with self._lock:
            self._commit(tournament_service.update_tournament(self._state, tournament))

    def join_tournament(
        self,
        tournament_id: str,
        player_names: List[str],
        match_type: Union[MatchType, str],
        fee: int,
    ) -> OperationResult:
        with self._lock:
            new_state, result = tournament_service.join_tournament(
                self._state, tournament_id, player_names, match_type, fee, self.locale
            )
            self._commit(new_state)
            return result

    # --- Payments ---

    def add_payment_request(self, payment: PaymentRequest) -> None:
        with self._lock:
            self._commit(payment_service.add_payment_request(self._state, payment))

    def process_payment(
        self,
        payment_id: str,
        status: Union[PaymentStatus, str],
        acting_as: Optional[User] = None,
    ) -> None:
        with self._lock:
            self._commit(payment_service.process_payment(self._state, payment_id, status, acting_as))

    # --- Settings & messaging ---

    def set_settings(self, app_settings: AppSettings) -> None:
        with self._lock:
            self._commit(settings_service.set_settings(self._state, app_settings))

    def send_message(self, text: str, receiver_id: str) -> None:
        with self._lock:
            self._commit(message_service.send_message(self._state, text, receiver_id))
