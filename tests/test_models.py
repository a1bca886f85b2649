from app.models import Comment, Ticket, User
from app.utils.security import get_password_hash, verify_password


def test_user_defaults():
    user = User(username="dora", email="dora@mail.com", password="hash")

    assert user.role == "basic"
    assert user.profile_picture == ""
    assert user.level == 0


def test_ticket_status_and_time_are_always_server_side():
    ticket = Ticket(userid=1, title="t", data="d", status="closed")

    assert ticket.status == "open"
    assert ticket.date_time is not None
    assert ticket.date_time.tzinfo is not None


def test_comment_starts_without_votes():
    comment = Comment(ticketid=1, userid=1, data="hi")

    assert comment.likes == 0
    assert comment.dislikes == 0


def test_password_hash_is_salted():
    first = get_password_hash("hunter2")
    second = get_password_hash("hunter2")

    assert first != "hunter2"
    assert first != second
    assert verify_password("hunter2", first)
    assert verify_password("hunter2", second)
    assert not verify_password("hunter3", first)
