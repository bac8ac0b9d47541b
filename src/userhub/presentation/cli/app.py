"""UserHub CLI application using Typer.

This module provides command-line utilities for the UserHub backend:
secret generation for deployment configuration, and creating the first
account (every user endpoint of the API requires a token).
"""

import asyncio
import secrets

import typer
from rich.console import Console
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine

from userhub.application.commands import CreateUserCommand
from userhub.domain.shared.exceptions import DomainException
from userhub.domain.user import User
from userhub.infrastructure.messaging import create_event_publisher
from userhub.infrastructure.persistence.sqlalchemy import (
    Base,
    UserRepositorySQLAlchemy,
)
from userhub_auth import PasswordHashingService, WeakPasswordError
from userhub_auth.persistence.sqlalchemy import AuthBase
from userhub_config.settings import get_settings

app = typer.Typer(
    name="userhub",
    help="UserHub - user management service CLI",
    no_args_is_help=True,
)
console = Console()


secrets_app = typer.Typer(
    name="secrets",
    help="Secret generation utilities",
    no_args_is_help=True,
)
app.add_typer(secrets_app)

users_app = typer.Typer(
    name="users",
    help="User account management",
    no_args_is_help=True,
)
app.add_typer(users_app)


@secrets_app.command("generate")
def generate_secrets() -> None:
    """Generate secure secrets for UserHub configuration.

    Generates the two required secrets:
    - JWT_SECRET_KEY: Secret for signing JWT access tokens
    - POSTGRES_PASSWORD: Database password

    Copy the output to your .env file.
    """
    console.print("\n[bold green]UserHub Secret Generation[/bold green]")
    console.print("=" * 60)

    # 64 bytes for a strong HS256 key
    jwt_secret = secrets.token_urlsafe(64)
    console.print(f"[cyan]JWT_SECRET_KEY[/cyan]={jwt_secret}")

    db_password = secrets.token_urlsafe(32)
    console.print(f"[cyan]POSTGRES_PASSWORD[/cyan]={db_password}")

    console.print("\n" + "=" * 60)
    console.print(
        "[yellow]Keep these secrets secure and never commit them "
        "to version control![/yellow]\n",
    )


async def _create_user(
    database_url: str,
    name: str,
    email: str,
    password: str,
) -> User:
    settings = get_settings()
    engine = create_async_engine(database_url)
    event_publisher = create_event_publisher(settings)
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
            await conn.run_sync(AuthBase.metadata.create_all)

        session_maker = async_sessionmaker(engine, expire_on_commit=False)
        async with session_maker() as session:
            command = CreateUserCommand(
                user_repository=UserRepositorySQLAlchemy(session),
                password_service=PasswordHashingService(
                    rounds=settings.password_hash_rounds,
                ),
                event_publisher=event_publisher,
                commit=session.commit,
            )
            user = await command.execute(name=name, email=email, password=password)
            return user
    finally:
        await event_publisher.close()
        await engine.dispose()


@users_app.command("create")
def create_user(
    name: str = typer.Option(..., "--name", "-n", help="Display name"),
    email: str = typer.Option(..., "--email", "-e", help="Email address"),
    password: str = typer.Option(
        ...,
        "--password",
        "-p",
        prompt=True,
        hide_input=True,
        confirmation_prompt=True,
        help="Password (prompted when omitted)",
    ),
    database_url: str | None = typer.Option(
        None,
        "--database-url",
        help="Override the configured database URL",
    ),
) -> None:
    """Create a user account directly in the database."""
    url = database_url or get_settings().database_url
    try:
        user = asyncio.run(_create_user(url, name, email, password))
    except (DomainException, WeakPasswordError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(code=1) from e

    console.print(
        f"[bold green]Created user[/bold green] #{user.id} {user.name} <{user.email}>",
    )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
