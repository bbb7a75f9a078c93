"""
To-Do List App Module

Provides To-Do list functionality including:
- TodoStore: In-memory collection and id generator
- TodoService: Validation and response shaping
- create_todo_blueprint: Flask Blueprint with the REST API routes
"""

from .models import Todo
from .store import TodoStore
from .service import TodoService
from .routes import create_todo_blueprint
from .exceptions import TodoError, TodoNotFoundError, TodoValidationError

__all__ = [
    'Todo', 'TodoStore', 'TodoService', 'create_todo_blueprint',
    'TodoError', 'TodoNotFoundError', 'TodoValidationError',
]
