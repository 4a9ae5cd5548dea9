import logging
from typing import Optional

from fastapi import Header, Request

from payroll_app.core.errors import Unauthenticated, Unauthorized
from payroll_app.core.security import Principal, Role, TokenCodec, TokenExpired, TokenInvalid

logger = logging.getLogger(__name__)


def get_token_codec(request: Request) -> TokenCodec:
    return request.app.state.tokens


def _bearer_token(authorization: Optional[str]) -> Optional[str]:
    if not authorization:
        return None
    parts = authorization.split()
    if len(parts) != 2 or parts[0].lower() != "bearer":
        return None
    return parts[1]


def require_role(role: Optional[Role] = None):
    """Build a route dependency that authenticates the caller.

    With no role the dependency only checks that the bearer token is valid.
    With a role it also rejects principals of the other role with 403.
    The decoded principal is returned and stored on ``request.state``.
    """

    async def gate(request: Request, authorization: Optional[str] = Header(default=None)) -> Principal:
        token = _bearer_token(authorization)
        if not token:
            raise Unauthenticated("No token provided")

        try:
            principal = get_token_codec(request).validate(token)
        except TokenExpired:
            logger.info("Rejected expired token on %s", request.url.path)
            raise Unauthenticated("Invalid token")
        except TokenInvalid:
            logger.info("Rejected invalid token on %s", request.url.path)
            raise Unauthenticated("Invalid token")

        if role is not None and principal.role is not role:
            raise Unauthorized("Insufficient permissions")

        request.state.principal = principal
        return principal

    return gate


authenticated = require_role()
admin_only = require_role(Role.ADMIN)
employee_only = require_role(Role.EMPLOYEE)
