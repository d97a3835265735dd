import logging
from typing import Optional, Tuple

from tourney_store.core.messages import get_message
from tourney_store.core.security import CredentialVerifier
from tourney_store.models import Role, StoreState, User
from tourney_store.schemas import OperationResult, RegistrationRequest

logger = logging.getLogger(__name__)


def login(
    state: StoreState,
    identifier: str,
    password: str,
    verifier: CredentialVerifier,
    locale: Optional[str] = None,
) -> Tuple[StoreState, OperationResult]:
    """
    Log in with either the phone number or the email/ID of an account.
    The failure message does not say which part was wrong.
    """
    for user in state.users:
        if identifier not in (user.phone, user.email):
            continue
        if verifier.verify(password, user.password_hash):
            logger.info("User %s logged in", user.id)
            new_state = state.model_copy(update={"current_user": user})
            return new_state, OperationResult(success=True, message=get_message("login_success", locale))

    logger.info("Rejected login attempt for %r", identifier)
    return state, OperationResult(success=False, message=get_message("invalid_credentials", locale))


def register(
    state: StoreState,
    candidate: RegistrationRequest,
    verifier: CredentialVerifier,
    locale: Optional[str] = None,
) -> Tuple[StoreState, OperationResult]:
    """
    Create a PLAYER account with zero balance and log it in.

    Phone and email must not belong to any existing account (exact match).
    A caller-supplied id must not be taken either.
    """
    exists = any(
        u.phone == candidate.phone
        or u.email == candidate.email
        or (candidate.id is not None and u.id == candidate.id)
        for u in state.users
    )
    if exists:
        return state, OperationResult(success=False, message=get_message("account_exists", locale))

    user_data = dict(
        name=candidate.name,
        phone=candidate.phone,
        email=candidate.email,
        password_hash=verifier.hash(candidate.password),
        balance=0,
        role=Role.PLAYER,
        joined_matches=[],
    )
    if candidate.id is not None:
        user_data["id"] = candidate.id
    user = User(**user_data)

    new_state = state.model_copy(update={"users": [*state.users, user], "current_user": user})
    logger.info("Registered user %s", user.id)
    return new_state, OperationResult(success=True, message=get_message("register_success", locale))


def logout(state: StoreState) -> StoreState:
    if state.current_user is None:
        return state
    logger.info("User %s logged out", state.current_user.id)
    return state.model_copy(update={"current_user": None})
