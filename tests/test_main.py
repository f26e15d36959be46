from unittest.mock import patch

from subscription_hub.common.database import SubscriptionRepository
from subscription_hub.main import print_status


def test_print_status_shows_history(session, soft_manager, capsys):
    soft_manager.subscribe(session, "a@x.com", "sports")
    soft_manager.unsubscribe(session, "a@x.com", "sports")
    soft_manager.subscribe(session, "a@x.com", "sports")
    session.commit()

    assert print_status("a@x.com", "sports") == 0

    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "a@x.com / sports: subscribed"
    assert len(lines) == 3
    assert lines[1].endswith("deleted=-")
    assert "deleted=-" not in lines[2]


def test_print_status_unknown_pair(db_url, capsys):
    assert print_status("b@x.com", "war") == 0
    assert capsys.readouterr().out.strip() == "b@x.com / war: unsubscribed"


def test_print_status_rejects_unknown_category(db_url, capsys):
    with patch.object(SubscriptionRepository, "get_history") as get_history:
        assert print_status("a@x.com", "music") == 2

    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("error: Invalid category and should be one of ")
    get_history.assert_not_called()


def test_print_status_rejects_invalid_email(db_url, capsys):
    assert print_status("not-an-email", "sports") == 2
    assert capsys.readouterr().err.strip() == "error: Invalid email address"
