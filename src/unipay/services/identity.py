"""Identity (user info) and web experience profiles."""

from __future__ import annotations

from unipay.client import PayPalClient
from unipay.errors import ProfileLookupError
from unipay.models.identity import UserInfo, WebProfile


class IdentityService:
    """Service for OpenID Connect user info and checkout web profiles."""

    def __init__(self, client: PayPalClient) -> None:
        self._client = client

    def user_info(self, schema: str = "openid") -> UserInfo:
        """Profile attributes of the user. PayPal only supports the openid schema."""
        return self._client.get(
            "/v1/identity/openidconnect/userinfo/", params={"schema": schema}, into=UserInfo
        )

    # ── Web experience profiles ──────────────────────────────────────

    def create_web_profile(self, profile: WebProfile) -> WebProfile:
        return self._client.post(
            "/v1/payment-experience/web-profiles", profile, into=WebProfile
        )

    def get_web_profile(self, profile_id: str) -> WebProfile:
        profile = self._client.get(
            f"/v1/payment-experience/web-profiles/{profile_id}", into=WebProfile
        )
        if profile is None or not profile.id:
            raise ProfileLookupError(f"Unable to get web profile with ID = {profile_id}")
        return profile

    def list_web_profiles(self) -> list[WebProfile]:
        profiles = self._client.get(
            "/v1/payment-experience/web-profiles", into=list[WebProfile]
        )
        return profiles or []

    def set_web_profile(self, profile: WebProfile) -> None:
        if not profile.id:
            raise ProfileLookupError("No ID specified for WebProfile")
        self._client.put(f"/v1/payment-experience/web-profiles/{profile.id}", profile)

    def delete_web_profile(self, profile_id: str) -> None:
        self._client.delete(f"/v1/payment-experience/web-profiles/{profile_id}")
