from fastapi.responses import JSONResponse
from mandram.core.result import Result


def error_response(reason: str, status_code: int = 500) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": reason})


def passthrough(result: Result, count: bool = False):
    """Return the Ok payload as-is (or wrapped as {"count": n}); Err becomes a 500 {"error"}"""
    if not result.is_ok:
        return error_response(result.reason)
    if count:
        return {"count": result.value}
    return result.value
