"""Shared-secret authorization for API requests."""

import hmac
from typing import Annotated

from fastapi import Depends, Header, Request

from auditor.api.dependencies import get_settings
from auditor.api.exceptions import UnauthorizedError
from auditor.config.settings import Settings
from auditor.observability.logging import get_logger

logger = get_logger(__name__)


async def verify_authorization(
    request: Request,
    settings: Annotated[Settings, Depends(get_settings)],
    authorization: Annotated[str | None, Header()] = None,
) -> None:
    """Require the Authorization header to equal the configured token.

    The check is disabled when no token is configured.

    Raises:
        UnauthorizedError: 401 if the header is missing or does not match
    """
    if settings.api.auth_token is None:
        return

    expected = settings.api.auth_token.get_secret_value()
    if authorization is None or not hmac.compare_digest(
        authorization.encode(), expected.encode()
    ):
        logger.error(
            "auth_token_mismatch",
            path=request.url.path,
            header_present=authorization is not None,
        )
        raise UnauthorizedError("Authorization header does not match the expected value")


AuthorizedDep = Annotated[None, Depends(verify_authorization)]
