from supabase import Client
from mandram.modules.registrations.schemas import RegistrationInput, RegistrationResult
from mandram.core.queries import error_message
from typing import Callable, Optional
import logging
import re

logger = logging.getLogger(__name__)

TABLE = "registrations"

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

REQUIRED_FIELDS_ERROR = "Name, email, and reason are required fields"
INVALID_EMAIL_ERROR = "Invalid email format"
SUBMIT_FAILED_ERROR = "Failed to submit registration. Please try again."


def validate_registration(data: RegistrationInput) -> Optional[str]:
    """Return an error message, or None when the input may be written"""
    if not data.name.strip() or not data.email.strip() or not data.reason.strip():
        return REQUIRED_FIELDS_ERROR
    if not EMAIL_PATTERN.match(data.email.strip()):
        return INVALID_EMAIL_ERROR
    return None


class RegistrationService:
    def __init__(self, client_factory: Callable[[], Client]):
        self.client_factory = client_factory

    def create_registration(self, data: RegistrationInput) -> RegistrationResult:
        """Validate locally, then insert. The client is only resolved once validation passes."""
        error = validate_registration(data)
        if error:
            return RegistrationResult(success=False, error=error)

        try:
            supabase = self.client_factory()
            supabase.table(TABLE).insert([{
                "name": data.name.strip(),
                "email": data.email.strip(),
                "phone": data.phone or None,
                "reason": data.reason.strip(),
                "message": data.message or None,
            }]).execute()
        except Exception as e:
            logger.error(f"Error creating registration: {error_message(e)}")
            return RegistrationResult(success=False, error=SUBMIT_FAILED_ERROR)

        logger.info("Registration received")
        return RegistrationResult(success=True)
