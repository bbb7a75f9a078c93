"""
To-Do List API Routes

Flask Blueprint for To-Do list REST API endpoints.
"""

import logging
from flask import Blueprint, jsonify, request

from .exceptions import TodoError

logger = logging.getLogger(__name__)


def _error(message, status):
    return jsonify({'success': False, 'error': message}), status


def _request_body():
    """Decoded JSON body, or None when it is missing or malformed"""
    return request.get_json(force=True, silent=True)


def create_todo_blueprint(service):
    """
    Build the To-Do Blueprint bound to a TodoService

    Args:
        service: TodoService instance shared by every route

    Returns:
        Flask Blueprint
    """
    todo_bp = Blueprint('todo', __name__)

    @todo_bp.route('/todos', methods=['GET'])
    def get_todos():
        """Get all to-do tasks"""
        try:
            status = request.args.get('filter', 'all')
            return jsonify(service.list_todos(status))
        except TodoError as e:
            logger.warning(f"Rejected todo listing: {e.message}")
            return _error(e.message, e.status_code)
        except Exception as e:
            logger.error(f"Failed to fetch todos: {e}", exc_info=True)
            return _error('Failed to fetch todos', 500)

    @todo_bp.route('/todos', methods=['POST'])
    def add_todo():
        """Add a new to-do task"""
        try:
            return jsonify(service.create_todo(_request_body())), 201
        except TodoError as e:
            logger.warning(f"Rejected new todo: {e.message}")
            return _error(e.message, e.status_code)
        except Exception as e:
            logger.error(f"Failed to create todo: {e}", exc_info=True)
            return _error('Failed to create todo', 500)

    @todo_bp.route('/todos', methods=['DELETE'])
    def delete_all_todos():
        """Delete every to-do task"""
        try:
            return jsonify(service.delete_all_todos())
        except Exception as e:
            logger.error(f"Failed to delete todos: {e}", exc_info=True)
            return _error('Failed to delete todos', 500)

    @todo_bp.route('/todos/<todo_id>', methods=['GET'])
    def get_todo(todo_id):
        """Get a single to-do task"""
        try:
            return jsonify(service.get_todo(todo_id))
        except TodoError as e:
            logger.warning(f"Rejected lookup of todo {todo_id}: {e.message}")
            return _error(e.message, e.status_code)
        except Exception as e:
            logger.error(f"Failed to fetch todo {todo_id}: {e}", exc_info=True)
            return _error('Failed to fetch todo', 500)

    @todo_bp.route('/todos/<todo_id>', methods=['PUT'])
    def update_todo(todo_id):
        """Update task text and/or completion status"""
        try:
            return jsonify(service.update_todo(todo_id, _request_body()))
        except TodoError as e:
            logger.warning(f"Rejected update of todo {todo_id}: {e.message}")
            return _error(e.message, e.status_code)
        except Exception as e:
            logger.error(f"Failed to update todo {todo_id}: {e}", exc_info=True)
            return _error('Failed to update todo', 500)

    @todo_bp.route('/todos/<todo_id>', methods=['DELETE'])
    def delete_todo(todo_id):
        """Delete a to-do task"""
        try:
            return jsonify(service.delete_todo(todo_id))
        except TodoError as e:
            logger.warning(f"Rejected deletion of todo {todo_id}: {e.message}")
            return _error(e.message, e.status_code)
        except Exception as e:
            logger.error(f"Failed to delete todo {todo_id}: {e}", exc_info=True)
            return _error('Failed to delete todo', 500)

    return todo_bp
