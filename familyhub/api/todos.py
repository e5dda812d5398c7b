"""Todo API endpoints."""

from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from familyhub.api.deps import get_current_user
from familyhub.api.lookups import resolve_users
from familyhub.database import get_session
from familyhub.models.todo import Todo
from familyhub.models.user import User
from familyhub.schemas.common import MessageResponse, iso
from familyhub.schemas.todo import TodoCreateRequest, TodoResponse, TodoUpdateRequest
from familyhub.services.todo_service import (
    create_todo,
    delete_todo,
    get_todo,
    list_todos,
    toggle_todo,
    update_todo,
)

router = APIRouter(prefix="/todos", tags=["todos"])


def _todo_to_response(t: Todo, users: dict[str, User]) -> TodoResponse:
    creator = users.get(t.created_by)
    assignee = users.get(t.assigned_to) if t.assigned_to else None
    return TodoResponse(
        id=t.id,
        family_id=t.family_id,
        title=t.title,
        description=t.description,
        completed=bool(t.completed),
        priority=t.priority,
        assigned_to=t.assigned_to,
        assigned_to_name=assignee.username if assignee else None,
        assigned_to_full_name=assignee.full_name if assignee else None,
        due_date=iso(t.due_date),
        created_by=t.created_by,
        created_by_name=creator.username if creator else None,
        created_at=iso(t.created_at),
    )


def _single(t: Todo, session: Session) -> TodoResponse:
    return _todo_to_response(t, resolve_users({t.created_by, t.assigned_to}, session))


@router.get("/{family_id}", response_model=list[TodoResponse])
def get_todos(
    family_id: str,
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    """List a family's todos: open first, then by due date."""
    todos = list_todos(session, family_id, user)
    user_ids = {t.created_by for t in todos} | {t.assigned_to for t in todos}
    users = resolve_users(user_ids, session)
    return [_todo_to_response(t, users) for t in todos]


@router.get("/todo/{todo_id}", response_model=TodoResponse)
def get_one_todo(
    todo_id: str,
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    return _single(get_todo(session, todo_id, user), session)


@router.post("", response_model=TodoResponse, status_code=status.HTTP_201_CREATED)
def post_todo(
    request: TodoCreateRequest,
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    todo = create_todo(
        session,
        user,
        family_id=request.family_id,
        title=request.title,
        description=request.description,
        priority=request.priority,
        assigned_to=request.assigned_to,
        due_date=request.due_date,
    )
    return _single(todo, session)


@router.put("/{todo_id}", response_model=TodoResponse)
def put_todo(
    todo_id: str,
    request: TodoUpdateRequest,
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    """Replace a todo's fields."""
    todo = update_todo(
        session,
        todo_id,
        user,
        title=request.title,
        description=request.description,
        completed=request.completed,
        priority=request.priority,
        assigned_to=request.assigned_to,
        due_date=request.due_date,
    )
    return _single(todo, session)


@router.patch("/{todo_id}/toggle", response_model=TodoResponse)
def toggle(
    todo_id: str,
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    """Flip a todo between done and not done."""
    return _single(toggle_todo(session, todo_id, user), session)


@router.delete("/{todo_id}", response_model=MessageResponse)
def remove_todo(
    todo_id: str,
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    delete_todo(session, todo_id, user)
    return MessageResponse(message="Todo deleted successfully")
