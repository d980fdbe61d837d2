"""Create the first back-office administrator.

Usage::

    python scripts/create_initial_user.py --email admin@example.com

The password is asked interactively unless ``--password`` is given.
"""

from __future__ import annotations

import argparse
from getpass import getpass

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from discovery.application.use_cases.users import create_user, ensure_default_roles
from discovery.domain.entities import ADMIN_ROLE_ALIAS, User
from discovery.infrastructure.database import SessionLocal, initialize_database


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--name", default="Administrador", help="Nombre visible")
    parser.add_argument("--email", default="admin@example.com", help="Correo de acceso")
    parser.add_argument("--password", help="Contraseña; se pide por consola si falta")
    parser.add_argument(
        "--visitor",
        action="store_true",
        help="Crear un visitante sin acceso al back-office",
    )
    return parser


def create_account(
    session: Session, *, name: str, email: str, password: str, visitor: bool
) -> User:
    """Seed the default roles and create the account with the requested role."""

    roles = {role.alias: role for role in ensure_default_roles(session)}
    return create_user(
        session,
        name=name,
        email=email,
        password=password,
        role_id=None if visitor else roles[ADMIN_ROLE_ALIAS].id,
    )


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    password = args.password or getpass("Contraseña: ")
    if not password:
        raise SystemExit("Se necesita una contraseña.")

    initialize_database()
    with SessionLocal() as session:
        try:
            user = create_account(
                session,
                name=args.name,
                email=args.email,
                password=password,
                visitor=args.visitor,
            )
        except (ValueError, SQLAlchemyError) as exc:
            session.rollback()
            raise SystemExit(f"No se pudo crear la cuenta: {exc}") from exc

    print(f"Cuenta #{user.id} creada para {user.email} con rol '{user.role.alias}'.")


if __name__ == "__main__":
    main()
