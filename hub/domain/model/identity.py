"""Provider identities.

A NormalizedIdentity is what every provider adapter converges to once a
login flow is verified. A LinkedAccount is the durable subset of it that
the ledger remembers across sessions.
"""

from pydantic import Field

from hub.domain.model.common import DomainModel
from hub.domain.value import GameProvider


class NormalizedIdentity(DomainModel):
    """Provider-agnostic identity produced by a completed login flow.

    Tokens are only present for OAuth2-style providers. Steam's OpenID
    flow yields an identity and nothing reusable.
    """

    provider: GameProvider
    provider_id: str = Field(min_length=1)  # Steam64 ID, Epic account ID
    display_name: str | None = None
    avatar_url: str | None = None
    email: str | None = None
    access_token: str | None = None
    refresh_token: str | None = None

    @property
    def key(self) -> tuple[GameProvider, str]:
        """Composite identity key."""
        return (self.provider, self.provider_id)


class LinkedAccount(DomainModel):
    """Provider identity remembered by the ledger.

    Keyed by (provider, provider_id). Refreshed on every successful
    callback for the same pair.
    """

    provider: GameProvider
    provider_id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    image: str | None = None
    access_token: str | None = None

    @property
    def key(self) -> tuple[GameProvider, str]:
        """Composite primary key."""
        return (self.provider, self.provider_id)

    @classmethod
    def from_identity(cls, identity: NormalizedIdentity) -> "LinkedAccount":
        """Keep the durable fields of a verified identity.

        Falls back to the provider id when the provider returned no
        display name, so the record stays valid.
        """
        return cls(
            provider=identity.provider,
            provider_id=identity.provider_id,
            name=identity.display_name or identity.provider_id,
            image=identity.avatar_url,
            access_token=identity.access_token,
        )
