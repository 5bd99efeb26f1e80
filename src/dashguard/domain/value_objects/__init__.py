"""Domain value objects."""

from dashguard.domain.value_objects.allow_list import (
    DENY_ALL,
    UNRESTRICTED,
    AllowList,
    RestrictedTo,
    Unrestricted,
    allow_list_from,
)
from dashguard.domain.value_objects.module import Module
from dashguard.domain.value_objects.permission import Permission
from dashguard.domain.value_objects.report import REPORT_NAMES, ReportId
from dashguard.domain.value_objects.role import Role

__all__ = [
    "DENY_ALL",
    "REPORT_NAMES",
    "UNRESTRICTED",
    "AllowList",
    "Module",
    "Permission",
    "ReportId",
    "RestrictedTo",
    "Role",
    "Unrestricted",
    "allow_list_from",
]
