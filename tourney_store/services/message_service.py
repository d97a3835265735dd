import logging
from datetime import datetime, timezone
from typing import List, Optional

from tourney_store.models import ChatMessage, StoreState

logger = logging.getLogger(__name__)


def send_message(
    state: StoreState,
    text: str,
    receiver_id: str,
    now: Optional[datetime] = None,
) -> StoreState:
    """Append a message from the logged-in user. Does nothing when logged out."""
    if state.current_user is None:
        logger.debug("Message ignored: nobody is logged in")
        return state

    chat_message = ChatMessage(
        sender_id=state.current_user.id,
        receiver_id=receiver_id,
        message=text,
        timestamp=now or datetime.now(timezone.utc),
    )
    logger.info("Message %s sent from %s to %s", chat_message.id, chat_message.sender_id, receiver_id)
    return state.model_copy(update={"messages": [*state.messages, chat_message]})


def messages_for_user(state: StoreState, user_id: str) -> List[ChatMessage]:
    return [m for m in state.messages if user_id in (m.sender_id, m.receiver_id)]


def conversation(state: StoreState, user_a: str, user_b: str) -> List[ChatMessage]:
    """Messages exchanged between two users, oldest first."""
    pair = {user_a, user_b}
    return [m for m in state.messages if {m.sender_id, m.receiver_id} == pair]
