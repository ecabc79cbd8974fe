"""collabgate - access control for team-owned document collections."""

__version__ = "0.1.0"
