"""
Remote service clients.

Thin clients for externally owned services. Nothing in the engines
depends on this package.
"""

from .study_guide import StudyGuideClient, StudyGuideError, create_retry_session

__all__ = ["StudyGuideClient", "StudyGuideError", "create_retry_session"]
