"""CRM backend — authentication, admin user management and dashboard metrics."""

__version__ = "1.0.0"
