import logging
from typing import List, Optional, Tuple, Union

from tourney_store.core.messages import get_message
from tourney_store.models import Entry, MatchType, StoreState, Tournament
from tourney_store.schemas import OperationResult

logger = logging.getLogger(__name__)


def add_tournament(state: StoreState, tournament: Tournament) -> StoreState:
    logger.info("Tournament %s added", tournament.id)
    return state.model_copy(update={"tournaments": [*state.tournaments, tournament]})


def remove_tournament(state: StoreState, tournament_id: str) -> StoreState:
    # Entries and joined_matches ids are left as history; fees are not refunded
    if state.find_tournament(tournament_id) is None:
        logger.debug("Remove ignored: tournament %s not found", tournament_id)
        return state
    tournaments = [t for t in state.tournaments if t.id != tournament_id]
    logger.info("Tournament %s removed", tournament_id)
    return state.model_copy(update={"tournaments": tournaments})


def update_tournament(state: StoreState, updated: Tournament) -> StoreState:
    """Replace the whole record with the same id; building a patched copy is up to the caller."""
    if state.find_tournament(updated.id) is None:
        logger.debug("Update ignored: tournament %s not found", updated.id)
        return state
    tournaments = [updated if t.id == updated.id else t for t in state.tournaments]
    logger.info("Tournament %s updated", updated.id)
    return state.model_copy(update={"tournaments": tournaments})


def join_tournament(
    state: StoreState,
    tournament_id: str,
    player_names: List[str],
    match_type: Union[MatchType, str],
    fee: int,
    locale: Optional[str] = None,
) -> Tuple[StoreState, OperationResult]:
    """
    Enter the logged-in user into a tournament and charge the entry fee.

    Checks run in order and the first failure is returned: logged in,
    balance covers the fee, tournament exists. On success the new entry,
    the fee deduction and the joined_matches update all land in one
    snapshot; there is no state where only some of them are visible.
    """
    user = state.current_user
    if user is None:
        return state, OperationResult(success=False, message=get_message("login_required", locale))
    if user.balance < fee:
        return state, OperationResult(success=False, message=get_message("insufficient_balance", locale))
    tournament = state.find_tournament(tournament_id)
    if tournament is None:
        return state, OperationResult(success=False, message=get_message("tournament_not_found", locale))

    entry = Entry(user_id=user.id, names=list(player_names), match_type=match_type, entry_paid=fee)
    joined_tournament = tournament.model_copy(update={"players": [*tournament.players, entry]})
    tournaments = [joined_tournament if t.id == tournament_id else t for t in state.tournaments]

    owner = state.find_user(user.id) or user
    joined_matches = owner.joined_matches
    if tournament_id not in joined_matches:
        joined_matches = [*joined_matches, tournament_id]
    charged_owner = owner.model_copy(update={"balance": owner.balance - fee, "joined_matches": joined_matches})

    new_state = state.model_copy(update={"tournaments": tournaments}).with_user(charged_owner)
    logger.info("User %s joined tournament %s paying %s", user.id, tournament_id, fee)
    return new_state, OperationResult(success=True, message=get_message("join_success", locale))
