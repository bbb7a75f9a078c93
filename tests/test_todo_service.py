"""
Unit tests for the todo collection service
"""

import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from todoapp.apps.todo import (
    TodoService, TodoStore, TodoNotFoundError, TodoValidationError,
)


def make_service(seed=True):
    store = TodoStore()
    if seed:
        store.seed()
    return TodoService(store)


def test_list_todos_shape():
    service = make_service()
    result = service.list_todos()

    assert result['success'] is True
    assert result['count'] == 3
    assert [t['id'] for t in result['todos']] == [1, 2, 3]
    assert set(result['todos'][0]) == {'id', 'text', 'completed', 'createdAt'}


def test_list_todos_filtered():
    service = make_service()

    assert service.list_todos('active')['count'] == 2
    assert service.list_todos('completed')['count'] == 1

    with pytest.raises(TodoValidationError):
        service.list_todos('someday')


def test_create_todo():
    service = make_service()
    result = service.create_todo({'text': '  New  '})

    assert result['success'] is True
    assert result['message'] == 'Todo created successfully'
    assert result['todo']['text'] == 'New'
    assert result['todo']['completed'] is False
    assert result['todo']['id'] == 4


def test_trimmed_and_untrimmed_text_store_the_same_value():
    service = make_service(seed=False)
    padded = service.create_todo({'text': '  A  '})['todo']
    plain = service.create_todo({'text': 'A'})['todo']

    assert padded['text'] == plain['text'] == 'A'


@pytest.mark.parametrize('payload', [
    {},
    {'text': ''},
    {'text': '   '},
    {'text': None},
    {'text': 42},
    {'text': ['a']},
    None,
    'just a string',
])
def test_create_todo_rejects_invalid_text(payload):
    service = make_service()

    with pytest.raises(TodoValidationError) as excinfo:
        service.create_todo(payload)

    assert excinfo.value.message == 'Todo text is required'
    assert service.store.count() == 3


def test_get_todo():
    service = make_service()

    assert service.get_todo(2)['todo']['text'] == 'Configure GitHub webhooks'
    assert service.get_todo('3')['todo']['id'] == 3

    with pytest.raises(TodoNotFoundError):
        service.get_todo(99)
    with pytest.raises(TodoNotFoundError):
        service.get_todo('abc')


def test_update_completed_only_keeps_text():
    service = make_service()
    result = service.update_todo(2, {'completed': True})

    assert result['message'] == 'Todo updated successfully'
    assert result['todo']['text'] == 'Configure GitHub webhooks'
    assert result['todo']['completed'] is True


def test_update_trims_text():
    service = make_service()
    result = service.update_todo(1, {'text': '  Rebuild pipeline '})

    assert result['todo']['text'] == 'Rebuild pipeline'
    assert result['todo']['completed'] is True


def test_update_accepts_empty_text():
    """Unlike create, update does not reject empty text"""
    service = make_service()
    result = service.update_todo(3, {'text': '   '})

    assert result['todo']['text'] == ''
    assert service.store.find_by_id(3).text == ''


def test_update_unknown_id_leaves_store_unchanged():
    service = make_service()
    before = [t.to_dict() for t in service.store.list()]

    with pytest.raises(TodoNotFoundError) as excinfo:
        service.update_todo(77, {'text': 'nope', 'completed': True})

    assert excinfo.value.message == 'Todo not found'
    assert [t.to_dict() for t in service.store.list()] == before


def test_update_with_invalid_fields_applies_nothing():
    service = make_service()

    with pytest.raises(TodoValidationError):
        service.update_todo(2, {'text': 'Changed', 'completed': 'yes'})
    with pytest.raises(TodoValidationError):
        service.update_todo(2, {'text': 5})
    with pytest.raises(TodoValidationError):
        service.update_todo(2, None)

    todo = service.store.find_by_id(2)
    assert todo.text == 'Configure GitHub webhooks'
    assert todo.completed is False


def test_delete_todo():
    service = make_service()
    result = service.delete_todo(1)

    assert result == {'success': True, 'message': 'Todo deleted successfully'}
    assert service.store.count() == 2

    with pytest.raises(TodoNotFoundError):
        service.delete_todo(1)


def test_delete_all_then_create_restarts_ids():
    service = make_service()
    first_id = service.store.list()[0].id

    assert service.delete_all_todos() == {'success': True, 'message': 'All todos deleted'}
    assert service.list_todos() == {'success': True, 'todos': [], 'count': 0}
    assert service.create_todo({'text': 'Fresh start'})['todo']['id'] == first_id


def test_parse_id():
    assert TodoService._parse_id(5) == 5
    assert TodoService._parse_id(' 12 ') == 12
    assert TodoService._parse_id('1.5') is None
    assert TodoService._parse_id(True) is None
    assert TodoService._parse_id(None) is None


def test_update_text_and_completed_together():
    service = make_service()
    result = service.update_todo(2, {'text': ' X ', 'completed': True})

    assert result['todo']['text'] == 'X'
    assert result['todo']['completed'] is True

    todo = service.store.find_by_id(2)
    assert (todo.text, todo.completed) == ('X', True)


def test_ids_must_be_plain_ascii_integers():
    service = make_service()

    assert TodoService._parse_id('-3') == -3
    assert TodoService._parse_id('٣') is None
    assert TodoService._parse_id('+2') is None
    assert TodoService._parse_id('1_0') is None
    assert TodoService._parse_id('') is None

    with pytest.raises(TodoNotFoundError):
        service.get_todo('٣')
    with pytest.raises(TodoNotFoundError):
        service.delete_todo('+2')
    assert service.store.count() == 3
