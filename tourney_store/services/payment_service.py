import logging
from typing import Optional, Union

from tourney_store.core.messages import get_message
from tourney_store.core.security import ensure_admin
from tourney_store.models import AppSettings, PaymentRequest, PaymentStatus, PaymentType, StoreState, User
from tourney_store.schemas import OperationResult

logger = logging.getLogger(__name__)


def add_payment_request(state: StoreState, payment: PaymentRequest) -> StoreState:
    """
    Queue a deposit or withdrawal for admin review.

    The request always enters as PENDING. Minimum amounts are not checked
    here; see ``check_payment_limits``.
    """
    pending = payment.model_copy(update={"status": PaymentStatus.PENDING.value})
    logger.info("Payment request %s (%s %s) queued for user %s", pending.id, pending.type, pending.amount, pending.user_id)
    return state.model_copy(update={"payments": [*state.payments, pending]})


def process_payment(
    state: StoreState,
    payment_id: str,
    status: Union[PaymentStatus, str],
    acting_as: Optional[User] = None,
) -> StoreState:
    """
    Settle a PENDING request as APPROVED or REJECTED.

    Only approval touches a balance: DEPOSIT adds the amount, WITHDRAW
    subtracts it. The balance is not clamped at zero, so approving a
    withdrawal larger than the balance leaves it negative.

    Unknown ids and already settled requests are ignored, which makes
    repeated calls harmless.
    """
    ensure_admin(acting_as)
    status = PaymentStatus(status)
    if status == PaymentStatus.PENDING:
        raise ValueError("Payment can only be settled as APPROVED or REJECTED")

    payment = state.find_payment(payment_id)
    if payment is None or payment.status != PaymentStatus.PENDING:
        logger.debug("Settlement ignored: payment %s missing or already settled", payment_id)
        return state

    settled = payment.model_copy(update={"status": status.value})
    payments = [settled if p.id == payment_id else p for p in state.payments]
    new_state = state.model_copy(update={"payments": payments})

    if status == PaymentStatus.APPROVED:
        owner = new_state.find_user(payment.user_id)
        if owner is None:
            logger.warning("Payment %s approved but user %s does not exist", payment_id, payment.user_id)
            return new_state
        delta = payment.amount if payment.type == PaymentType.DEPOSIT else -payment.amount
        new_state = new_state.with_user(owner.model_copy(update={"balance": owner.balance + delta}))
        logger.info("Payment %s approved, user %s balance %s -> %s", payment_id, owner.id, owner.balance, owner.balance + delta)
    else:
        logger.info("Payment %s rejected", payment_id)
    return new_state


def check_payment_limits(
    app_settings: AppSettings,
    payment_type: Union[PaymentType, str],
    amount: int,
    locale: Optional[str] = None,
) -> OperationResult:
    """Pre-submit check against the configured minimum deposit/withdraw amounts."""
    payment_type = PaymentType(payment_type)
    if payment_type == PaymentType.DEPOSIT and amount < app_settings.min_deposit:
        return OperationResult(
            success=False,
            message=get_message("below_min_deposit", locale, minimum=app_settings.min_deposit),
        )
    if payment_type == PaymentType.WITHDRAW and amount < app_settings.min_withdraw:
        return OperationResult(
            success=False,
            message=get_message("below_min_withdraw", locale, minimum=app_settings.min_withdraw),
        )
    return OperationResult(success=True, message=get_message("payment_limits_ok", locale))
