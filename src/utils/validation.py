"""
Structural validation for user payloads and path identifiers
"""

import logging
import re
from dataclasses import dataclass, field
from typing import List, Optional

from email_validator import validate_email, EmailNotValidError

logger = logging.getLogger(__name__)

USER_ID_PATTERN = re.compile(r"[+-]?[0-9]+")

# Ids are stored as BIGINT
MIN_USER_ID = -2**63
MAX_USER_ID = 2**63 - 1

@dataclass
class FieldError:
    field: str
    message: str

    def to_dict(self) -> dict:
        return {"field": self.field, "message": self.message}

@dataclass
class ValidationResult:
    """Outcome of validating a payload; errors is empty when valid"""
    errors: List[FieldError] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.errors

    def summary(self) -> str:
        return "; ".join(f"{e.field}: {e.message}" for e in self.errors)


def is_valid_email(email: str) -> bool:
    """Syntax-only email check; no DNS lookups"""
    try:
        validate_email(email, check_deliverability=False)
        return True
    except EmailNotValidError as e:
        logger.debug(f"Rejected email '{email}': {e}")
        return False


def validate_user_payload(name: Optional[str], email: Optional[str]) -> ValidationResult:
    """
    Validate the user fields before anything reaches the store.

    Args:
        name: Display name, must be non-empty after trimming
        email: Email address, must be syntactically valid

    Returns:
        ValidationResult listing every failing field
    """
    result = ValidationResult()

    if name is None or not name.strip():
        result.errors.append(FieldError("name", "must not be blank"))

    if email is None or not email.strip():
        result.errors.append(FieldError("email", "must not be blank"))
    elif not is_valid_email(email):
        result.errors.append(FieldError("email", "must be a well-formed email address"))

    return result


def parse_user_id(raw: str) -> Optional[int]:
    """Parse a path segment as a user id; returns None unless it is a plain integer in BIGINT range"""
    if raw is None or not USER_ID_PATTERN.fullmatch(raw):
        return None
    user_id = int(raw)
    if not MIN_USER_ID <= user_id <= MAX_USER_ID:
        return None
    return user_id
