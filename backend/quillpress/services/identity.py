"""Bearer credential verification against the identity provider."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache

import requests

from quillpress.config import settings
from quillpress.exceptions import ConfigurationError, InfrastructureError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VerifiedIdentity:
    """Stable user id and email behind a valid credential."""

    id: str
    email: str | None = None


class SupabaseIdentityClient:
    """Resolve access tokens through the Supabase Auth user endpoint."""

    def __init__(self, base_url: str, anon_key: str, timeout: int = 10):
        self.base_url = (base_url or "").rstrip("/")
        self.anon_key = anon_key
        self.timeout = timeout

    def verify(self, token: str) -> VerifiedIdentity | None:
        """Return the identity behind ``token``, or None when it is not valid.

        Raises:
            ConfigurationError: If the provider URL is not configured
            InfrastructureError: If the provider cannot be reached or fails
        """
        if not self.base_url:
            raise ConfigurationError("SUPABASE_URL is required")

        headers = {
            "Authorization": f"Bearer {token}",
            "apikey": self.anon_key,
        }
        try:
            response = requests.get(
                f"{self.base_url}/auth/v1/user",
                headers=headers,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.warning("Identity provider request failed: %s", exc)
            raise InfrastructureError(f"Identity provider unavailable: {exc}") from exc

        if response.status_code >= 500:
            logger.warning("Identity provider returned %s", response.status_code)
            raise InfrastructureError(
                f"Identity provider error: HTTP {response.status_code}"
            )
        if not response.ok:
            return None

        try:
            payload = response.json()
        except ValueError:
            return None
        user_id = payload.get("id") if isinstance(payload, dict) else None
        if not user_id:
            return None
        return VerifiedIdentity(id=user_id, email=payload.get("email"))


@lru_cache
def get_identity_client() -> SupabaseIdentityClient:
    """Shared identity client built from settings."""
    return SupabaseIdentityClient(
        settings.supabase_url,
        settings.supabase_anon_key,
        timeout=settings.identity_timeout_seconds,
    )
