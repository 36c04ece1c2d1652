from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class LoginContext:
    """Who is acting on the current request.

    Passed explicitly into every operation; ``actor_id`` ends up in the audit
    columns, ``trainee_id`` selects whose attendance is read or written.
    """

    trainee_id: int
    role: Role
    actor_id: int
    account_id: Optional[int] = None
    course_id: Optional[int] = None

    @property
    def is_student(self) -> bool:
        return self.role == Role.STUDENT
