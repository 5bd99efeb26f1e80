"""dashguard - role-based access control for the business analytics dashboard."""

__version__ = "0.1.0"
