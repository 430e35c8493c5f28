from database.crud import goal, habit, journal, list_items
from database.crud.errors import NotFoundError, InvalidHierarchyError
from database.crud.list_resource import ListResource

__all__ = [
    "goal",
    "habit",
    "journal",
    "list_items",
    "ListResource",
    "NotFoundError",
    "InvalidHierarchyError",
]
