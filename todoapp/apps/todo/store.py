"""
To-Do Store

Owns the live in-memory todo collection and the id generator.
"""

import logging
import threading
from typing import Iterable, List, Optional, Tuple

from .models import Todo, utc_timestamp


INITIAL_ID = 1

STATUS_FILTERS = ('all', 'active', 'completed')

SEED_TODOS = [
    ('Set up Jenkins pipeline', True),
    ('Configure GitHub webhooks', False),
    ('Collect build logs for AIOps', False),
]


class TodoStore:
    """Authoritative owner of the todo list"""

    def __init__(self):
        """
        Initialize an empty store

        All operations share one lock guarding both the list and the id counter,
        since the web server handles requests on multiple threads.
        """
        self.logger = logging.getLogger(__name__)
        self._lock = threading.RLock()
        self._todos: List[Todo] = []
        self._next_id = INITIAL_ID

    def list(self) -> List[Todo]:
        """Get all todos in insertion order"""
        with self._lock:
            return list(self._todos)

    def list_by_status(self, status: str) -> List[Todo]:
        """
        Get todos matching a status filter

        Args:
            status: 'all', 'active' or 'completed'

        Returns:
            Matching todos in insertion order
        """
        if status not in STATUS_FILTERS:
            raise ValueError(f"Unknown status filter: {status}")

        with self._lock:
            if status == 'active':
                return [t for t in self._todos if not t.completed]
            if status == 'completed':
                return [t for t in self._todos if t.completed]
            return list(self._todos)

    def count(self) -> int:
        with self._lock:
            return len(self._todos)

    def insert(self, text: str) -> Todo:
        """
        Create and append a new todo

        Args:
            text: Todo text, already validated as non-empty by the caller

        Returns:
            The stored Todo
        """
        with self._lock:
            todo = Todo(
                id=self._next_id,
                text=text.strip(),
                completed=False,
                created_at=utc_timestamp()
            )
            self._next_id += 1
            self._todos.append(todo)
            return todo

    def find_by_id(self, todo_id: int) -> Optional[Todo]:
        with self._lock:
            for todo in self._todos:
                if todo.id == todo_id:
                    return todo
            return None

    def update_by_id(self, todo_id: int, text: Optional[str] = None,
                     completed: Optional[bool] = None) -> Optional[Todo]:
        """
        Apply a partial update in place

        Args:
            todo_id: Id of the todo to update
            text: New text (trimmed before storing), or None to keep
            completed: New completion flag, or None to keep

        Returns:
            The updated Todo, or None if no todo has that id
        """
        with self._lock:
            todo = self.find_by_id(todo_id)
            if todo is None:
                return None

            if text is not None:
                todo.text = text.strip()
            if completed is not None:
                todo.completed = completed
            return todo

    def delete_by_id(self, todo_id: int) -> bool:
        """Remove a todo, returning whether anything was removed"""
        with self._lock:
            initial_count = len(self._todos)
            self._todos = [t for t in self._todos if t.id != todo_id]
            return len(self._todos) < initial_count

    def clear(self):
        """Remove every todo and restart ids at the initial value"""
        with self._lock:
            self._todos = []
            self._next_id = INITIAL_ID

    def seed(self, items: Iterable[Tuple[str, bool]] = SEED_TODOS):
        """
        Populate the store with starting data

        Args:
            items: (text, completed) pairs, inserted in order
        """
        with self._lock:
            for text, completed in items:
                todo = self.insert(text)
                todo.completed = completed
            self.logger.info(f"Seeded {len(self._todos)} todos")
