"""Caller resolution and role guards.

Route handlers declare the access they need as a dependency:

- ``get_optional_auth``: anonymous readers allowed, never fails.
- ``require_auth``: any verified identity (401 otherwise).
- ``require_admin``: admin or superadmin (401 without a credential, 403 for users).
- ``require_super_admin``: superadmin only.

Roles come from the ``app_users`` row keyed by the identity provider's user
id. A verified identity without a row is a plain user.
"""
from __future__ import annotations

import enum
import logging
from dataclasses import dataclass

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from quillpress.database import get_db
from quillpress.exceptions import Forbidden, Unauthorized
from quillpress.models import AppUser, UserRole
from quillpress.services.identity import SupabaseIdentityClient, get_identity_client

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


class CallerKind(str, enum.Enum):
    """Who is making the request."""

    ANONYMOUS = "anonymous"
    USER = "user"
    ADMIN = "admin"
    SUPERADMIN = "superadmin"


_KIND_BY_ROLE = {
    UserRole.USER: CallerKind.USER,
    UserRole.ADMIN: CallerKind.ADMIN,
    UserRole.SUPERADMIN: CallerKind.SUPERADMIN,
}


@dataclass(frozen=True)
class Caller:
    """Resolved identity and role of the current request."""

    kind: CallerKind
    id: str | None = None
    email: str | None = None

    @property
    def is_authenticated(self) -> bool:
        return self.kind != CallerKind.ANONYMOUS

    @property
    def is_admin(self) -> bool:
        return self.kind in (CallerKind.ADMIN, CallerKind.SUPERADMIN)

    @property
    def role(self) -> UserRole | None:
        if not self.is_authenticated:
            return None
        return UserRole(self.kind.value)


ANONYMOUS = Caller(kind=CallerKind.ANONYMOUS)


def get_bearer_token(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> str | None:
    if credentials is None or not credentials.credentials:
        return None
    return credentials.credentials


def resolve_caller(
    token: str | None,
    db: Session,
    identity_client: SupabaseIdentityClient,
) -> Caller:
    """Verify ``token`` and attach the caller's role.

    Raises:
        Unauthorized: If the token is missing or not valid
    """
    if not token:
        raise Unauthorized()

    identity = identity_client.verify(token)
    if identity is None:
        raise Unauthorized()

    record = db.get(AppUser, identity.id)
    if record is None:
        return Caller(kind=CallerKind.USER, id=identity.id, email=identity.email)
    return Caller(
        kind=_KIND_BY_ROLE[record.role],
        id=identity.id,
        email=record.email or identity.email,
    )


def require_auth(
    token: str | None = Depends(get_bearer_token),
    db: Session = Depends(get_db),
    identity_client: SupabaseIdentityClient = Depends(get_identity_client),
) -> Caller:
    return resolve_caller(token, db, identity_client)


def require_admin(caller: Caller = Depends(require_auth)) -> Caller:
    if not caller.is_admin:
        raise Forbidden()
    return caller


def require_super_admin(caller: Caller = Depends(require_auth)) -> Caller:
    if caller.kind != CallerKind.SUPERADMIN:
        raise Forbidden()
    return caller


def get_optional_auth(
    token: str | None = Depends(get_bearer_token),
    db: Session = Depends(get_db),
    identity_client: SupabaseIdentityClient = Depends(get_identity_client),
) -> Caller:
    if not token:
        return ANONYMOUS
    try:
        return resolve_caller(token, db, identity_client)
    except Exception as exc:
        logger.debug("Treating caller as anonymous: %s", exc)
        return ANONYMOUS
