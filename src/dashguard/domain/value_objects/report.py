"""Report views gated independently of modules."""

from dashguard.domain.value_objects.catalog import CatalogEnum


class ReportId(CatalogEnum):
    """Identifier of an individual report view."""

    DASHBOARD_SUMMARY = "dashboard-summary"
    MONTHLY_REVENUE = "monthly-revenue"
    MONTHLY_INCOME = "monthly-income"
    MONTH_TO_MONTH = "month-to-month"
    YTD_SALES = "ytd-sales"
    YTD_INCOME = "ytd-income"
    MONTHLY_PROJECTION = "monthly-projection"
    MONTHLY_SERVICE = "monthly-service"
    MONTHLY_EXPENSE = "monthly-expense"

    @property
    def display_name(self) -> str:
        return REPORT_NAMES[self]


REPORT_NAMES: dict[ReportId, str] = {
    ReportId.DASHBOARD_SUMMARY: "Dashboard Summary",
    ReportId.MONTHLY_REVENUE: "Monthly Revenue",
    ReportId.MONTHLY_INCOME: "Monthly Income",
    ReportId.MONTH_TO_MONTH: "Month to Month Comparative",
    ReportId.YTD_SALES: "Year to Date - Sales",
    ReportId.YTD_INCOME: "Year to Date - Income",
    ReportId.MONTHLY_PROJECTION: "Monthly Projection",
    ReportId.MONTHLY_SERVICE: "Monthly Service Breakdown",
    ReportId.MONTHLY_EXPENSE: "Monthly Expense Report",
}
