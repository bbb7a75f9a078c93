"""
To-Do Collection Service

Validates requests, applies them to the TodoStore and shapes the response bodies.
"""

import logging
import re
from typing import Any, Dict, Optional

from .exceptions import TodoNotFoundError, TodoValidationError
from .store import STATUS_FILTERS, TodoStore


_ID_PATTERN = re.compile(r'-?[0-9]+', re.ASCII)


class TodoService:
    """Request-facing contract for the todo collection"""

    def __init__(self, store: TodoStore):
        """
        Initialize TodoService

        Args:
            store: Shared TodoStore instance
        """
        self.store = store
        self.logger = logging.getLogger(__name__)

    def list_todos(self, status: str = 'all') -> Dict[str, Any]:
        """
        List todos, optionally filtered by completion status

        Args:
            status: 'all', 'active' or 'completed'
        """
        if status not in STATUS_FILTERS:
            raise TodoValidationError('Invalid filter')

        todos = self.store.list_by_status(status)
        return {
            'success': True,
            'todos': [todo.to_dict() for todo in todos],
            'count': len(todos),
        }

    def create_todo(self, payload: Any) -> Dict[str, Any]:
        """
        Create a todo from a request body

        Args:
            payload: Decoded JSON body, expected to be {'text': str}
        """
        text = payload.get('text') if isinstance(payload, dict) else None
        if not isinstance(text, str) or not text.strip():
            raise TodoValidationError('Todo text is required')

        todo = self.store.insert(text)
        self.logger.info(f"Added todo {todo.id}: {todo.text}")
        return {
            'success': True,
            'todo': todo.to_dict(),
            'message': 'Todo created successfully',
        }

    def delete_all_todos(self) -> Dict[str, Any]:
        self.store.clear()
        self.logger.info("Deleted all todos")
        return {'success': True, 'message': 'All todos deleted'}

    def get_todo(self, todo_id: Any) -> Dict[str, Any]:
        todo = self.store.find_by_id(self._require_id(todo_id))
        if todo is None:
            raise TodoNotFoundError()
        return {'success': True, 'todo': todo.to_dict()}

    def update_todo(self, todo_id: Any, payload: Any) -> Dict[str, Any]:
        """
        Update text and/or completion flag of a todo

        Text is trimmed but not checked for emptiness, unlike create_todo.
        Both fields are validated before either one is applied.

        Args:
            todo_id: Raw id from the request path
            payload: Decoded JSON body, {'text'?: str, 'completed'?: bool}
        """
        todo_id = self._require_id(todo_id)
        if self.store.find_by_id(todo_id) is None:
            raise TodoNotFoundError()

        if not isinstance(payload, dict):
            raise TodoValidationError('Invalid todo fields')

        text = payload.get('text')
        completed = payload.get('completed')
        if text is not None and not isinstance(text, str):
            raise TodoValidationError('Invalid todo fields')
        if completed is not None and not isinstance(completed, bool):
            raise TodoValidationError('Invalid todo fields')

        todo = self.store.update_by_id(todo_id, text=text, completed=completed)
        if todo is None:
            # Deleted by another request between lookup and update
            raise TodoNotFoundError()

        self.logger.info(f"Updated todo {todo.id}: completed={todo.completed}")
        return {
            'success': True,
            'todo': todo.to_dict(),
            'message': 'Todo updated successfully',
        }

    def delete_todo(self, todo_id: Any) -> Dict[str, Any]:
        todo_id = self._require_id(todo_id)
        if not self.store.delete_by_id(todo_id):
            raise TodoNotFoundError()

        self.logger.info(f"Deleted todo {todo_id}")
        return {'success': True, 'message': 'Todo deleted successfully'}

    def _require_id(self, todo_id: Any) -> int:
        """Parse a path id; anything that is not an integer addresses no todo"""
        parsed = self._parse_id(todo_id)
        if parsed is None:
            raise TodoNotFoundError()
        return parsed

    @staticmethod
    def _parse_id(todo_id: Any) -> Optional[int]:
        """Accept plain ASCII integers only (optionally negative)"""
        if isinstance(todo_id, bool):
            return None
        if isinstance(todo_id, int):
            return todo_id
        text = str(todo_id).strip()
        if not _ID_PATTERN.fullmatch(text):
            return None
        return int(text)
