"""Student aggregate: the account directory print orders resolve against.

Accounts are created by the signup flow; this context only needs the
username, the notification address and the role. Teachers are privileged:
their orders jump the shop queue.
"""

from datetime import UTC, datetime
from enum import Enum

from protean.fields import DateTime, String

from printing.domain import printing


class AccountRole(Enum):
    STUDENT = "Student"
    TEACHER = "Teacher"


PRIVILEGED_ROLES = frozenset({AccountRole.TEACHER})


@printing.aggregate
class Student:
    username = String(identifier=True, max_length=50)
    email = String(required=True, max_length=254)
    phone = String(max_length=20)
    role = String(choices=AccountRole, default=AccountRole.STUDENT.value)
    created_at = DateTime()

    @classmethod
    def register(cls, username, email, phone=None, role=None):
        return cls(
            username=username,
            email=email,
            phone=phone,
            role=role or AccountRole.STUDENT.value,
            created_at=datetime.now(UTC),
        )

    @property
    def is_privileged(self) -> bool:
        return AccountRole(self.role) in PRIVILEGED_ROLES
