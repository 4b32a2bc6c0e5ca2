"""Map use-case failures to HTTP errors."""

from fastapi import HTTPException, status

_STATUS_BY_CODE = {
    "not_found": status.HTTP_404_NOT_FOUND,
    "forbidden": status.HTTP_403_FORBIDDEN,
    "invalid": status.HTTP_400_BAD_REQUEST,
}


def raise_for_result(result) -> None:
    """Raise an HTTPException if a use-case result is unsuccessful."""
    if result.success:
        return
    raise HTTPException(
        status_code=_STATUS_BY_CODE.get(result.error_code, status.HTTP_400_BAD_REQUEST),
        detail=result.error_message,
    )
