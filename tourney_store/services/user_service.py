import logging
from typing import Any, Dict, Optional, Union

from tourney_store.core.security import CredentialVerifier, ensure_admin
from tourney_store.models import StoreState, User
from tourney_store.schemas import AdminUserUpdate, ProfileUpdate

logger = logging.getLogger(__name__)


def _merge_user(user: User, update_data: Dict[str, Any], verifier: CredentialVerifier) -> User:
    update_data = dict(update_data)
    password = update_data.pop("password", None)
    if password is not None:
        update_data["password_hash"] = verifier.hash(password)
    if "joined_matches" in update_data:
        update_data["joined_matches"] = list(dict.fromkeys(update_data["joined_matches"]))
    return user.model_copy(update=update_data)


def update_profile(
    state: StoreState,
    updates: Union[ProfileUpdate, Dict[str, Any]],
    verifier: CredentialVerifier,
) -> StoreState:
    """Apply the logged-in player's own edits. Does nothing when logged out."""
    if state.current_user is None:
        logger.debug("Profile update ignored: nobody is logged in")
        return state

    if not isinstance(updates, ProfileUpdate):
        updates = ProfileUpdate.model_validate(updates)
    update_data = updates.model_dump(exclude_unset=True, exclude_none=True)
    if not update_data:
        return state

    # Merge into the collection record; the session copy is refreshed from it
    base = state.find_user(state.current_user.id) or state.current_user
    merged = _merge_user(base, update_data, verifier)
    logger.info("User %s updated profile fields %s", merged.id, sorted(update_data))
    return state.with_user(merged)


def admin_update_user(
    state: StoreState,
    user_id: str,
    updates: Union[AdminUserUpdate, Dict[str, Any]],
    verifier: CredentialVerifier,
    acting_as: Optional[User] = None,
) -> StoreState:
    """
    Merge an admin's edits into any account, including balance and role.

    The admin check is normally done by the caller; pass ``acting_as`` to
    have it enforced here.
    """
    ensure_admin(acting_as)

    target = state.find_user(user_id)
    if target is None:
        logger.debug("Admin update ignored: user %s not found", user_id)
        return state

    if not isinstance(updates, AdminUserUpdate):
        updates = AdminUserUpdate.model_validate(updates)
    update_data = updates.model_dump(exclude_unset=True, exclude_none=True)
    if not update_data:
        return state

    merged = _merge_user(target, update_data, verifier)
    logger.info("Admin updated user %s fields %s", user_id, sorted(update_data))
    return state.with_user(merged)
