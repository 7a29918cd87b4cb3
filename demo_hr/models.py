"""
Database models for the demo HR site.

Key Concepts Demonstrated:
- SQLAlchemy declarative models
- Werkzeug password hashing
- JSON column for free-form profile sections
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any

from werkzeug.security import check_password_hash, generate_password_hash

from demo_hr import db

logger = logging.getLogger(__name__)


class User(db.Model):
    """
    Account created through sign-up and used to log in.

    Attributes:
        id: Auto-incrementing primary key.
        email: Unique login email (long enough for boundary tests).
        password_hash: Werkzeug hash of the password.
        first_name: Given name from the sign-up form.
        last_name: Family name from the sign-up form.
        company_name: Company the account was created for.
        created_at: Creation timestamp (UTC).
    """

    __tablename__ = "users"

    id: int = db.Column(db.Integer, primary_key=True)
    email: str = db.Column(db.String(320), unique=True, nullable=False, index=True)
    password_hash: str = db.Column(db.String(256), nullable=False)
    first_name: str = db.Column(db.String(255), nullable=False, default="")
    last_name: str = db.Column(db.String(255), nullable=False, default="")
    company_name: str = db.Column(db.String(255), nullable=False, default="")
    created_at: datetime = db.Column(
        db.DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    def set_password(self, password: str) -> None:
        self.password_hash = generate_password_hash(password)

    def check_password(self, password: str) -> bool:
        return check_password_hash(self.password_hash, password)


class Employee(db.Model):
    """
    Employee record edited through the profile screens.

    ``profile`` holds one dict per section (summary, job, personal)
    keyed by field name.
    """

    __tablename__ = "employees"

    id: int = db.Column(db.Integer, primary_key=True)
    profile: dict = db.Column(db.JSON, nullable=False, default=dict)
    updated_at: datetime = db.Column(
        db.DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    def section(self, name: str) -> dict[str, Any]:
        return dict((self.profile or {}).get(name, {}))

    def update_section(self, name: str, values: dict[str, Any]) -> None:
        # Reassign so SQLAlchemy notices the JSON change
        profile = dict(self.profile or {})
        profile[name] = {**profile.get(name, {}), **values}
        self.profile = profile

    @property
    def display_name(self) -> str:
        summary = self.section("summary")
        return f"{summary.get('first_name', '')} {summary.get('last_name', '')}".strip()


def seed_defaults(admin_email: str, admin_password: str, employee_id: int) -> None:
    """Create the admin account and the employee record if missing."""
    if not db.session.execute(db.select(User).filter_by(email=admin_email)).scalar_one_or_none():
        admin = User(email=admin_email, first_name="Admin", last_name="User",
                     company_name="Playwright Automation")
        admin.set_password(admin_password)
        db.session.add(admin)
        logger.info("Seeded admin account %s", admin_email)

    if db.session.get(Employee, employee_id) is None:
        employee = Employee(id=employee_id, profile={
            "summary": {"person_type": "Employee", "title": "Mr",
                        "first_name": "Admin", "last_name": "User",
                        "email": admin_email},
            "job": {"company_department_id": "Engineering", "provider": "Default Provider",
                    "company_contracttype_id": "Permanent"},
            "personal": {},
        })
        db.session.add(employee)
        logger.info("Seeded employee %s", employee_id)

    db.session.commit()
