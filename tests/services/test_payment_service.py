import pytest
from pydantic import ValidationError

from tourney_store.core.messages import get_message
from tourney_store.models import AppSettings, PaymentRequest, PaymentStatus, PaymentType
from tourney_store.services import payment_service


def _with_payment(state, **fields):
    data = dict(id="p1", user_id="user-1", type=PaymentType.DEPOSIT, amount=200)
    data.update(fields)
    return payment_service.add_payment_request(state, PaymentRequest(**data))


class TestAddPaymentRequest:

    def test_request_is_appended_pending(self, default_state):
        new_state = _with_payment(default_state)
        assert len(new_state.payments) == 1
        assert new_state.payments[0].status == PaymentStatus.PENDING
        # Adding a request never moves money
        assert new_state.users == default_state.users

    def test_status_forced_to_pending(self, default_state):
        new_state = _with_payment(default_state, status=PaymentStatus.APPROVED)
        assert new_state.find_payment("p1").status == PaymentStatus.PENDING

    def test_amount_must_be_positive(self):
        with pytest.raises(ValidationError):
            PaymentRequest(user_id="user-1", type=PaymentType.DEPOSIT, amount=0)


class TestProcessPayment:

    def test_approve_deposit(self, default_state):
        state = default_state.with_user(default_state.find_user("user-1").model_copy(update={"balance": 300}))
        state = _with_payment(state, amount=200)
        new_state = payment_service.process_payment(state, "p1", "APPROVED")
        assert new_state.find_user("user-1").balance == 500
        assert new_state.find_payment("p1").status == PaymentStatus.APPROVED

    def test_approve_withdraw(self, default_state):
        state = _with_payment(default_state, type=PaymentType.WITHDRAW, amount=200)
        new_state = payment_service.process_payment(state, "p1", PaymentStatus.APPROVED)
        assert new_state.find_user("user-1").balance == 300

    def test_approved_withdraw_can_go_negative(self, default_state):
        state = _with_payment(default_state, type=PaymentType.WITHDRAW, amount=800)
        new_state = payment_service.process_payment(state, "p1", "APPROVED")
        assert new_state.find_user("user-1").balance == -300

    def test_reject_leaves_balances_alone(self, default_state):
        state = _with_payment(default_state, amount=200)
        new_state = payment_service.process_payment(state, "p1", "REJECTED")
        assert new_state.find_payment("p1").status == PaymentStatus.REJECTED
        assert new_state.users == state.users

    def test_approve_changes_only_target_user(self, default_state):
        state = _with_payment(default_state, amount=200)
        new_state = payment_service.process_payment(state, "p1", "APPROVED")
        assert new_state.find_user("admin-1") == state.find_user("admin-1")

    @pytest.mark.parametrize("status", ["APPROVED", "REJECTED"])
    def test_second_settlement_is_noop(self, default_state, status):
        state = _with_payment(default_state)
        settled = payment_service.process_payment(state, "p1", status)
        assert payment_service.process_payment(settled, "p1", status) is settled

    def test_rejected_request_cannot_be_approved_later(self, default_state):
        state = _with_payment(default_state)
        rejected = payment_service.process_payment(state, "p1", "REJECTED")
        assert payment_service.process_payment(rejected, "p1", "APPROVED") is rejected

    def test_unknown_payment_is_noop(self, default_state):
        assert payment_service.process_payment(default_state, "missing", "APPROVED") is default_state

    def test_pending_is_not_a_settlement(self, default_state):
        state = _with_payment(default_state)
        with pytest.raises(ValueError):
            payment_service.process_payment(state, "p1", "PENDING")

    def test_approval_refreshes_session(self, player_state):
        state = _with_payment(player_state, amount=200)
        new_state = payment_service.process_payment(state, "p1", "APPROVED")
        assert new_state.current_user.balance == 700
        assert new_state.current_user == new_state.find_user("user-1")

    def test_approval_for_missing_user_only_settles(self, default_state):
        state = _with_payment(default_state, user_id="deleted-user")
        new_state = payment_service.process_payment(state, "p1", "APPROVED")
        assert new_state.find_payment("p1").status == PaymentStatus.APPROVED
        assert new_state.users == state.users

    def test_player_caller_is_refused(self, default_state):
        state = _with_payment(default_state)
        with pytest.raises(PermissionError):
            payment_service.process_payment(state, "p1", "APPROVED", acting_as=state.find_user("user-1"))


class TestPaymentLimits:

    def test_deposit_below_minimum(self):
        result = payment_service.check_payment_limits(AppSettings(), "DEPOSIT", 50, "en")
        assert result.success is False
        assert result.message == get_message("below_min_deposit", "en", minimum=100)

    def test_withdraw_below_minimum(self):
        result = payment_service.check_payment_limits(AppSettings(min_withdraw=300), PaymentType.WITHDRAW, 250, "en")
        assert result.success is False
        assert "300" in result.message

    def test_amount_at_minimum_is_ok(self):
        assert payment_service.check_payment_limits(AppSettings(), "DEPOSIT", 100).success is True
        assert payment_service.check_payment_limits(AppSettings(), "WITHDRAW", 200).success is True
