"""Use case for deleting a user."""

from sqlalchemy.orm import Session

from discovery.infrastructure.repositories import UserRepository


def delete_user(session: Session, user_id: int, *, deleted_by: int | None = None) -> None:
    """Delete the specified user; administrators cannot delete themselves."""

    repository = UserRepository(session)
    user = repository.get(user_id)
    if user is None:
        raise ValueError("Usuario no encontrado")
    if deleted_by is not None and deleted_by == user_id:
        raise PermissionError("No puedes eliminar tu propio usuario")
    repository.delete(user_id)
