"""Capability permissions."""

from dashguard.domain.value_objects.catalog import CatalogEnum


class Permission(CatalogEnum):
    """Independent capability flags."""

    # Dashboard
    VIEW_DASHBOARD = "view_dashboard"
    VIEW_REPORTS = "view_reports"

    # Sales
    VIEW_SALES = "view_sales"
    CREATE_SALES = "create_sales"
    EDIT_SALES = "edit_sales"
    DELETE_SALES = "delete_sales"

    # Expenses
    VIEW_EXPENSES = "view_expenses"
    CREATE_EXPENSES = "create_expenses"
    EDIT_EXPENSES = "edit_expenses"
    DELETE_EXPENSES = "delete_expenses"

    # Departments
    VIEW_DEPARTMENTS = "view_departments"
    MANAGE_DEPARTMENTS = "manage_departments"

    # Users
    VIEW_USERS = "view_users"
    MANAGE_USERS = "manage_users"

    # Targets
    VIEW_TARGETS = "view_targets"
    MANAGE_TARGETS = "manage_targets"

    VIEW_AUDIT = "view_audit"
    EXPORT_DATA = "export_data"
