"""Catalog of permissions, modules, reports and role defaults."""

from typing import Any

from dashguard.domain.access_control import AccessControlEvaluator
from dashguard.domain.value_objects import Module, Permission, ReportId, Role


def describe_catalog(evaluator: AccessControlEvaluator) -> dict[str, Any]:
    """Everything a permission-editing form needs to render its choices."""
    return {
        "permissions": {p.name: p.value for p in Permission},
        "modules": {m.name: m.value for m in Module},
        "reports": [{"id": r.value, "name": r.display_name} for r in ReportId],
        "roles": [r.value for r in Role],
        "default_permissions": evaluator.role_defaults.as_dict(),
    }
