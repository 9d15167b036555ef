# frontend/streamlit_app/services/capability.py
# SPDX-License-Identifier: Apache-2.0
"""Capability gating for "create X" affordances.

A create button is either available or disabled with an explanation shown as
a tooltip. That is *capability* gating (the feature is not usable yet) and it
is deliberately kept apart from *validation* gating (a form is incomplete),
which the key dialog expresses through ``KeyConfigurationForm.is_complete``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

PERMISSION_TYPES: Final[tuple[str, ...]] = ("resource", "scope")


@dataclass(frozen=True)
class Capability:
    enabled: bool
    explanation: str = ""

    @property
    def tooltip(self) -> str | None:
        """Text to show next to a disabled affordance, ``None`` when enabled."""
        return None if self.enabled else self.explanation


@dataclass(frozen=True)
class CreateAffordance:
    """A gated "create" button: label and explanation are message keys."""

    label_key: str
    testid: str
    capability: Capability

    @property
    def disabled(self) -> bool:
        return not self.capability.enabled


def _title(value: str) -> str:
    return value[:1].upper() + value[1:]


def permission_affordance(permission_type: str, available: bool) -> CreateAffordance:
    """Build the create button for a resource- or scope-based permission."""
    if permission_type not in PERMISSION_TYPES:
        raise ValueError(f"Unknown permission type: {permission_type}")
    name = _title(permission_type)
    return CreateAffordance(
        label_key=f"create{name}BasedPermission",
        testid=f"create-{permission_type}",
        capability=Capability(enabled=available, explanation=f"no{name}CreateHint"),
    )


def permission_affordances(
    resource_available: bool = True, scope_available: bool = True
) -> list[CreateAffordance]:
    """Create buttons shown in the empty permissions state, in display order."""
    return [
        permission_affordance("resource", resource_available),
        permission_affordance("scope", scope_available),
    ]
