"""Family todo list."""

from datetime import datetime

from sqlmodel import Session, col, select

from familyhub.errors import ValidationError
from familyhub.models.todo import Todo
from familyhub.models.user import User
from familyhub.services.access import get_scoped, is_member, require_member


def _check_assignee(session: Session, family_id: str, assigned_to: str | None) -> None:
    if assigned_to and not is_member(session, assigned_to, family_id):
        raise ValidationError("Assignee is not a member of this family")


def create_todo(
    session: Session,
    user: User,
    family_id: str,
    title: str,
    description: str | None = None,
    priority: str = "medium",
    assigned_to: str | None = None,
    due_date: datetime | None = None,
) -> Todo:
    require_member(session, user.id, family_id)
    _check_assignee(session, family_id, assigned_to)

    todo = Todo(
        family_id=family_id,
        title=title,
        description=description or None,
        priority=priority,
        assigned_to=assigned_to or None,
        due_date=due_date,
        created_by=user.id,
    )
    session.add(todo)
    session.commit()
    session.refresh(todo)
    return todo


def list_todos(session: Session, family_id: str, user: User) -> list[Todo]:
    """Open todos first, then by due date (undated last), then newest."""
    require_member(session, user.id, family_id)
    return list(
        session.exec(
            select(Todo)
            .where(Todo.family_id == family_id)
            .order_by(
                col(Todo.completed).asc(),
                col(Todo.due_date).asc().nulls_last(),
                col(Todo.created_at).desc(),
            )
        ).all()
    )


def get_todo(session: Session, todo_id: str, user: User) -> Todo:
    return get_scoped(session, Todo, todo_id, user.id)


def update_todo(
    session: Session,
    todo_id: str,
    user: User,
    title: str,
    description: str | None = None,
    completed: bool = False,
    priority: str = "medium",
    assigned_to: str | None = None,
    due_date: datetime | None = None,
) -> Todo:
    """Replace all mutable fields of a todo."""
    todo = get_scoped(session, Todo, todo_id, user.id)
    _check_assignee(session, todo.family_id, assigned_to)

    todo.title = title
    todo.description = description or None
    todo.completed = completed
    todo.priority = priority
    todo.assigned_to = assigned_to or None
    todo.due_date = due_date
    session.add(todo)
    session.commit()
    session.refresh(todo)
    return todo


def toggle_todo(session: Session, todo_id: str, user: User) -> Todo:
    todo = get_scoped(session, Todo, todo_id, user.id)
    todo.completed = not todo.completed
    session.add(todo)
    session.commit()
    session.refresh(todo)
    return todo


def delete_todo(session: Session, todo_id: str, user: User) -> None:
    todo = get_scoped(session, Todo, todo_id, user.id)
    session.delete(todo)
    session.commit()
