from core.messages import t
from services.masthead import MastheadFeatures, MenuItem, build_masthead, logged_in_user_name


def test_full_name_when_both_names_present():
    token = {"given_name": "Ada", "family_name": "Lovelace", "preferred_username": "ada"}
    assert logged_in_user_name(token, t) == "Ada Lovelace"


def test_name_fallbacks():
    assert logged_in_user_name({"given_name": "Ada"}, t) == "Ada"
    assert logged_in_user_name({"family_name": "Lovelace"}, t) == "Lovelace"
    assert logged_in_user_name({"preferred_username": "ada"}, t) == "ada"
    assert logged_in_user_name({}, t) == "Anonymous"
    assert logged_in_user_name(None, t) == "Anonymous"


def test_menu_appends_account_entries():
    custom = MenuItem("realm", "Realm info")
    model = build_masthead(None, t, dropdown_items=[custom], logout="https://idp/logout")
    assert [item.key for item in model.dropdown] == ["realm", "manageAccount", "signOut"]
    assert model.dropdown[-1].url == "https://idp/logout"
    assert model.title == "Anonymous"


def test_features_remove_entries_and_username():
    features = MastheadFeatures(has_logout=False, has_manage_account=False, has_username=False)
    model = build_masthead({"given_name": "Ada"}, t, features=features)
    assert model.title is None
    assert model.dropdown == ()


def test_caller_items_come_before_account_entries():
    a, b = MenuItem("a", "A"), MenuItem("b", "B")
    model = build_masthead(None, t, dropdown_items=[a, b])
    assert [item.key for item in model.dropdown] == ["a", "b", "manageAccount", "signOut"]

def test_callable_action_is_kept():
    calls = []
    model = build_masthead(None, t, manage_account=lambda: calls.append("account"))
    model.dropdown[0].on_click()
    assert calls == ["account"]
    assert model.dropdown[0].url is None
