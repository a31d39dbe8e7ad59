"""Orchestration layer for coordinating services."""

from .app_controller import STUDY_TOPICS, AppController, StudyTopic
from .edit_session import EditSession
from .factory import create_controller, create_stores

__all__ = [
    "AppController",
    "EditSession",
    "StudyTopic",
    "STUDY_TOPICS",
    "create_controller",
    "create_stores",
]
