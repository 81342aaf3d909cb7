from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from mandram.database.supabase_client import get_supabase
from mandram.modules.registrations.schemas import RegistrationInput, RegistrationResult
from mandram.modules.registrations.service import RegistrationService, SUBMIT_FAILED_ERROR

router = APIRouter(prefix="/registrations", tags=["registrations"])


def get_registration_service() -> RegistrationService:
    return RegistrationService(get_supabase)


@router.post("", response_model=RegistrationResult, response_model_exclude_none=True, status_code=201)
async def create_registration(
    body: RegistrationInput,
    service: RegistrationService = Depends(get_registration_service)
):
    """Submit the contact form registration (400 on invalid input, 500 when the write fails)"""
    result = service.create_registration(body)
    if not result.success:
        status_code = 500 if result.error == SUBMIT_FAILED_ERROR else 400
        return JSONResponse(status_code=status_code, content=result.model_dump())
    return result
