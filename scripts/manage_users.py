"""Create users or check a password against the configured database.

    python scripts/manage_users.py create admin@yitro.com "Admin" --role admin
    python scripts/manage_users.py check admin@yitro.com
"""

import argparse
import getpass
import os
import sys

# Add parent dir to path
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from crm_backend.config import get_settings
from crm_backend.core.exceptions import AppError
from crm_backend.infrastructure.database import Base, SessionLocal, engine
from crm_backend.application.services.security import PasswordHasher
from crm_backend.application.services.user_service import create_user
from crm_backend.infrastructure.repositories.user_repository import SQLAlchemyUserRepository
import crm_backend.domain.models  # noqa: F401


def cmd_create(args, repo, hasher) -> int:
    password = args.password or getpass.getpass("Password: ")
    try:
        user = create_user(repo, hasher, args.email, args.display_name, password, args.role)
    except AppError as e:
        print(f"Error: {e.message}")
        return 1
    print(f"Created {user.email} ({user.role}) id={user.id}")
    return 0


def cmd_check(args, repo, hasher) -> int:
    user = repo.get_by_email(args.email)
    if user is None:
        print(f"No user with email {args.email}")
        return 1
    password = args.password or getpass.getpass("Password: ")
    if hasher.verify(password, user.password_hash):
        print(f"Password OK for {user.email} ({user.role}), last login: {user.last_login}")
        return 0
    print(f"Password does not match for {user.email}")
    return 1


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="CRM user administration")
    sub = parser.add_subparsers(dest="command", required=True)

    create = sub.add_parser("create", help="create a user")
    create.add_argument("email")
    create.add_argument("display_name")
    create.add_argument("--role", default="user", choices=["user", "admin"])
    create.add_argument("--password", help="prompted for when omitted")

    check = sub.add_parser("check", help="verify a user's password")
    check.add_argument("email")
    check.add_argument("--password", help="prompted for when omitted")

    args = parser.parse_args(argv)

    Base.metadata.create_all(bind=engine)
    hasher = PasswordHasher(rounds=get_settings().BCRYPT_ROUNDS)
    db = SessionLocal()
    try:
        repo = SQLAlchemyUserRepository(db)
        if args.command == "create":
            return cmd_create(args, repo, hasher)
        return cmd_check(args, repo, hasher)
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
