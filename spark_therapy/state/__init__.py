"""
State containers for the spark_therapy client.
"""

from .session_state import Session

__all__ = [
    'Session',
]
