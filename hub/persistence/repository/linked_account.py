"""Cookie-backed linked-account ledger."""

import logfire
from pydantic import ValidationError

from hub.config import AuthSettings
from hub.domain.model import LinkedAccount
from hub.domain.repository import LinkedAccountStore
from hub.domain.value import GameProvider
from hub.persistence.cookie import LEDGER_COOKIE, CookieJar
from hub.util.jwt import JWTError, read_payload, sign_payload

# Optional record fields; a bad value is discarded, not the record
OPTIONAL_FIELDS = ("image", "accessToken", "access_token")


class CookieLinkedAccountStore(LinkedAccountStore):
    """Ledger kept in one signed cookie holding a JSON array of accounts.

    Every write rewrites the whole array. The cookie lives for a year
    from the last write.
    """

    def __init__(self, jar: CookieJar, auth_settings: AuthSettings) -> None:
        self.jar = jar
        self.auth_settings = auth_settings

    async def list_all(self) -> list[LinkedAccount]:
        """Read the ledger.

        An absent or unverifiable cookie reads as empty. Records that fail
        validation are dropped one by one; the rest survive.
        """
        raw = self.jar.get(LEDGER_COOKIE)
        if not raw:
            return []

        try:
            records = read_payload(raw, self.auth_settings)
        except JWTError as e:
            logfire.warn("Linked accounts cookie rejected", error=str(e))
            return []

        if not isinstance(records, list):
            logfire.warn("Invalid linked accounts data: not an array")
            return []

        accounts = []
        for record in records:
            try:
                accounts.append(LinkedAccount.model_validate(_strip_bad_optionals(record)))
            except ValidationError:
                logfire.warn("Dropping invalid linked account record")
        return accounts

    async def upsert(self, account: LinkedAccount) -> None:
        """Replace the record with the same key in place, or append."""
        accounts = await self.list_all()
        for i, existing in enumerate(accounts):
            if existing.key == account.key:
                accounts[i] = account
                break
        else:
            accounts.append(account)

        self._write(accounts)

    async def remove(self, provider: GameProvider, provider_id: str) -> None:
        """Forget an account; delete the cookie once nothing is left."""
        accounts = [
            a for a in await self.list_all() if a.key != (provider, provider_id)
        ]
        if accounts:
            self._write(accounts)
        else:
            self.jar.delete(LEDGER_COOKIE)

    def _write(self, accounts: list[LinkedAccount]) -> None:
        max_age = self.auth_settings.ledger_max_age_seconds
        payload = [
            a.model_dump(mode="json", by_alias=True, exclude_none=True)
            for a in accounts
        ]
        self.jar.set(
            LEDGER_COOKIE,
            sign_payload(payload, self.auth_settings, max_age_seconds=max_age),
            max_age=max_age,
        )


def _strip_bad_optionals(record):
    """Drop optional fields that are not strings.

    Only provider, providerId and name decide whether a record survives.
    """
    if not isinstance(record, dict):
        return record
    return {
        key: value
        for key, value in record.items()
        if key not in OPTIONAL_FIELDS or isinstance(value, str)
    }
