"""Application view states."""

from enum import Enum


class View(Enum):
    """Screens the application controller can be in."""

    HOME = "home"
    SEARCH_RESULTS = "search-results"
    DETAILS = "details"
    ADMIN_LIST = "admin-list"
    ADMIN_EDIT = "admin-edit"
