"""Student registration: command, handler and directory lookups."""

import structlog
from protean import handle
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import String
from protean.utils.globals import current_domain

from printing.domain import printing
from printing.student.student import AccountRole, Student

logger = structlog.get_logger(__name__)


@printing.command(part_of="Student")
class RegisterStudent:
    username = String(required=True, max_length=50)
    email = String(required=True, max_length=254)
    phone = String(max_length=20)
    role = String(choices=AccountRole, default=AccountRole.STUDENT.value)


@printing.command_handler(part_of=Student)
class RegisterStudentHandler:
    @handle(RegisterStudent)
    def register_student(self, command):
        repo = current_domain.repository_for(Student)
        try:
            repo.get(command.username)
        except ObjectNotFoundError:
            pass
        else:
            raise ValidationError({"username": ["Username is already taken"]})

        student = Student.register(
            username=command.username,
            email=command.email,
            phone=command.phone,
            role=command.role,
        )
        repo.add(student)
        logger.info("Student registered", username=student.username, role=student.role)
        return student.username


def find_email(username: str) -> str | None:
    """Notification address of ``username``, or None when it cannot be resolved."""
    try:
        student = current_domain.repository_for(Student).get(username)
    except ObjectNotFoundError:
        return None
    return student.email or None


def privileged_usernames(usernames) -> set[str]:
    """Subset of ``usernames`` that belong to privileged accounts."""
    repo = current_domain.repository_for(Student)
    privileged = set()
    for username in set(usernames):
        try:
            student = repo.get(username)
        except ObjectNotFoundError:
            continue
        if student.is_privileged:
            privileged.add(username)
    return privileged
