import pytest

from skillswap.models import SwapRequest, SwapRequestStatus, User


@pytest.mark.parametrize("target", [SwapRequestStatus.ACCEPTED, SwapRequestStatus.REJECTED])
def test_pending_request_can_be_resolved(target):
    request = SwapRequest(status=SwapRequestStatus.PENDING)
    assert request.can_transition_to(target)


@pytest.mark.parametrize("current", [SwapRequestStatus.ACCEPTED, SwapRequestStatus.REJECTED])
@pytest.mark.parametrize("target", list(SwapRequestStatus))
def test_terminal_request_never_moves(current, target):
    request = SwapRequest(status=current)
    assert not request.can_transition_to(target)


def test_pending_is_not_a_target():
    request = SwapRequest(status=SwapRequestStatus.PENDING)
    assert not request.can_transition_to(SwapRequestStatus.PENDING)


def test_other_party():
    sender = User(id=1, username="a", name="A", hashed_password="x")
    receiver = User(id=2, username="b", name="B", hashed_password="x")
    request = SwapRequest(sender_id=1, receiver_id=2, sender=sender, receiver=receiver)

    assert request.other_party(1) is receiver
    assert request.other_party(2) is sender
