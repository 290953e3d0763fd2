"""Session entity."""

from datetime import datetime

from hub.domain.model.common import DomainModel
from hub.domain.model.identity import NormalizedIdentity


class Session(DomainModel):
    """Active authenticated context for one browser.

    Self-contained: the signed token carries everything, there is no
    server-side record to look up or revoke.
    """

    identity: NormalizedIdentity
    issued_at: datetime
    expires_at: datetime
