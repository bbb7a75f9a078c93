"""
Errors raised by the todo service and translated into HTTP responses by the routes.
"""


class TodoError(Exception):
    """Base class for request errors reported back to the caller"""

    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class TodoValidationError(TodoError):
    status_code = 400


class TodoNotFoundError(TodoError):
    status_code = 404

    def __init__(self, message: str = 'Todo not found'):
        super().__init__(message)
