"""
spark_therapy - A Textual client for the SPARK therapy clinic

Terminal client for a multi-role (admin, therapist, parent) therapy clinic.
Authenticated users land in one of three role-specific navigation trees, each
a tab navigator of day-to-day destinations wrapped by a stack navigator for
drill-down screens. Navigation can be driven from outside the widget tree
through the session router (after logout, from auth callbacks, etc.).
"""

__version__ = "0.1.0"

__all__ = [
    "__version__",
]
