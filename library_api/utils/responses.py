"""
Envelope to HTTP status mapping.

Services report failures through ErrorKind; routers translate the kind
into a status code here, never by inspecting the message text.

    NOT_FOUND              -> 404
    CONFLICT               -> 400
    REFERENTIAL_INTEGRITY  -> 400 (routes may override, e.g. PUT -> 404)
    INTERNAL               -> 500
"""

from collections.abc import Mapping

from fastapi import status

from library_api.schemas.common import ApiResponse, ErrorKind, PagedResponse

ERROR_STATUS: dict[ErrorKind, int] = {
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.CONFLICT: status.HTTP_400_BAD_REQUEST,
    ErrorKind.REFERENTIAL_INTEGRITY: status.HTTP_400_BAD_REQUEST,
    ErrorKind.INTERNAL: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def status_for(
    result: ApiResponse | PagedResponse,
    success_status: int = status.HTTP_200_OK,
    overrides: Mapping[ErrorKind, int] | None = None,
) -> int:
    """
    Pick the HTTP status for a service result.

    Args:
        result: Envelope returned by a service function
        success_status: Status used when result.success is true
        overrides: Per-route replacements for ERROR_STATUS entries

    Returns:
        HTTP status code
    """
    if result.success:
        return success_status

    if overrides and result.error_kind in overrides:
        return overrides[result.error_kind]
    return ERROR_STATUS.get(result.error_kind, status.HTTP_500_INTERNAL_SERVER_ERROR)
