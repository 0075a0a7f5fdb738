from ingredient_admin.core.notifications import (
    SESSION_KEY,
    Notification,
    NotificationCategory,
    SessionNotificationStore,
)


def test_notifications_are_popped_once_in_order():
    session = {}
    store = SessionNotificationStore(session)
    store.push(Notification(category=NotificationCategory.SUCCESS, message="premier"))
    store.push(Notification(category=NotificationCategory.NOT_FOUND, message="second"))

    popped = store.pop_all()

    assert [(n.category, n.message) for n in popped] == [
        (NotificationCategory.SUCCESS, "premier"),
        (NotificationCategory.NOT_FOUND, "second"),
    ]
    assert store.pop_all() == []
    assert SESSION_KEY not in session


def test_session_holds_plain_json_values():
    session = {}
    SessionNotificationStore(session).push(Notification(category="error", message="oups"))

    assert session[SESSION_KEY] == [{"category": "error", "message": "oups"}]


def test_empty_session_pops_nothing():
    assert SessionNotificationStore({}).pop_all() == []
