"""Create (or promote) an ADMIN account.

    python scripts/create_admin.py --email admin@msrit.edu --name "Dept Admin" --password secret123 --department CSE
"""
import argparse

from dept_events.db.base import Base
from dept_events.db.session import SessionLocal, engine
from dept_events.core.security import hash_password
from dept_events.models.enums import Department, UserRole
from dept_events.models.user import User


def create_admin(email: str, name: str, password: str, department: str):
    Base.metadata.create_all(bind=engine)

    db = SessionLocal()
    try:
        email = email.lower()
        user = db.query(User).filter(User.email == email).first()

        if user:
            user.role = UserRole.ADMIN
            print(f"Promoted existing user to ADMIN: {user.email}")
        else:
            user = User(
                name=name,
                email=email,
                password_hash=hash_password(password),
                role=UserRole.ADMIN,
                department=Department(department),
            )
            db.add(user)
            print(f"Created ADMIN user: {email}")

        db.commit()
    finally:
        db.close()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Create or promote an ADMIN account")
    parser.add_argument("--email", required=True)
    parser.add_argument("--name", default="Administrator")
    parser.add_argument("--password", required=True)
    parser.add_argument("--department", default="CSE", choices=[d.value for d in Department])
    args = parser.parse_args()

    create_admin(args.email, args.name, args.password, args.department)
