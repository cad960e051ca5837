"""Domain services."""

from .revalidation import Revalidate, RevalidationRecorder, no_revalidation
from .thread_service import ThreadNode, ThreadPage, ThreadService
from .user_service import AuthorSummary, UserPage, UserService

__all__ = [
    "AuthorSummary",
    "Revalidate",
    "RevalidationRecorder",
    "ThreadNode",
    "ThreadPage",
    "ThreadService",
    "UserPage",
    "UserService",
    "no_revalidation",
]
