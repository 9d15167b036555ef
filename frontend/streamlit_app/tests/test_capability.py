import pytest

from services.capability import Capability, permission_affordance, permission_affordances


def test_enabled_capability_has_no_tooltip():
    assert Capability(True, "hint").tooltip is None


def test_disabled_capability_explains_itself():
    assert Capability(False, "hint").tooltip == "hint"


def test_permission_affordances_order_and_keys():
    resource, scope = permission_affordances()
    assert resource.label_key == "createResourceBasedPermission"
    assert resource.testid == "create-resource"
    assert scope.label_key == "createScopeBasedPermission"
    assert not resource.disabled and not scope.disabled


def test_unavailable_permission_is_disabled_with_hint():
    resource, scope = permission_affordances(resource_available=False, scope_available=True)
    assert resource.disabled
    assert resource.capability.tooltip == "noResourceCreateHint"
    assert scope.capability.tooltip is None


def test_unknown_permission_type():
    with pytest.raises(ValueError):
        permission_affordance("role", True)
