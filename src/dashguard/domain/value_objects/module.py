"""Functional areas gated as a unit."""

from dashguard.domain.value_objects.catalog import CatalogEnum


class Module(CatalogEnum):
    """Dashboard module."""

    DASHBOARD = "dashboard"
    SALES = "sales"
    EXPENSES = "expenses"
    DEPARTMENTS = "departments"
    REPORTS = "reports"
    TARGETS = "targets"
    USERS = "users"
    AUDIT = "audit"
