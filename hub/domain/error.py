"""Domain layer errors.

Every error carries a machine-readable ``code``. Login and callback
routes turn any DomainError into a redirect to the frontend error page
with that code in the query string.
"""


class DomainError(Exception):
    """Base domain error."""

    code = "unexpected"

    def __init__(self, message: str, code: str | None = None):
        super().__init__(message)
        if code is not None:
            self.code = code


class ProtocolError(DomainError):
    """Malformed or forged provider response."""

    code = "protocol_error"


class MissingIdentityError(ProtocolError):
    """Callback carried no recognizable provider user id."""

    code = "missing_identity"


class InvalidModeError(ProtocolError):
    """OpenID assertion mode was not ``id_res``."""

    code = "invalid_mode"


class VerificationFailedError(ProtocolError):
    """Provider refused to confirm the assertion."""

    code = "verification_failed"


class NoProfileDataError(ProtocolError):
    """Provider returned no profile for a verified identity."""

    code = "no_profile_data"


class ProviderDeniedError(ProtocolError):
    """Provider redirected back with an ``error`` parameter."""

    def __init__(self, provider: str, error: str):
        self.provider = provider
        self.error = error
        super().__init__(
            f"{provider} returned error: {error}", code=f"{provider}_{error}"
        )


class MissingCodeError(ProtocolError):
    """OAuth callback without an authorization code."""

    code = "missing_code"


class InvalidStateError(ProtocolError):
    """State token missing or not matching the stored one."""

    code = "invalid_state"


class TokenExchangeFailedError(ProtocolError):
    """Authorization code could not be exchanged for tokens."""

    code = "token_exchange_failed"


class ProfileFetchFailedError(ProtocolError):
    """Profile lookup with a fresh access token failed."""

    code = "profile_fetch_failed"


class ProviderNotSupportedError(DomainError):
    """Provider has no login flow (catalog-only or unknown)."""

    def __init__(self, provider: str):
        self.provider = provider
        super().__init__(
            f"Login is not supported for provider: {provider}",
            code=f"{provider}_not_supported",
        )


class UpstreamUnavailableError(DomainError):
    """Network or HTTP failure calling a provider."""

    code = "upstream_unavailable"


class ConfigurationMissingError(DomainError):
    """API key or client credentials are not configured."""

    code = "not_configured"


class MissingCredentialError(DomainError):
    """Linked account lacks the credential its catalog fetcher needs."""

    code = "missing_credential"


class UnauthorizedError(DomainError):
    """No valid session."""

    code = "unauthorized"

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message)
