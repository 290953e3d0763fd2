"""Unit tests for the request-scoped cookie jar."""

from starlette.responses import RedirectResponse, Response

from hub.persistence.cookie import CookieJar, credential_cookie, state_cookie


def set_cookie_headers(response: Response) -> list[str]:
    return [v.decode() for k, v in response.raw_headers if k == b"set-cookie"]


class TestCookieJar:
    """Tests for reads, queued writes and applying them."""

    def test_cookie_names(self):
        assert state_cookie("epic") == "epic-oauth-state"
        assert credential_cookie("steam") == "steam-user"

    def test_reads_incoming_cookies(self):
        jar = CookieJar({"a": "1", "empty": ""})

        assert jar.get("a") == "1"
        assert jar.get("empty") is None
        assert jar.get("missing") is None

    def test_reads_see_queued_writes(self):
        jar = CookieJar({"a": "1"})

        jar.set("a", "2", max_age=60)
        jar.set("b", "3", max_age=60)
        assert jar.get("a") == "2"
        assert jar.get("b") == "3"

        jar.delete("a")
        assert jar.get("a") is None
        assert jar.pending["a"] == (None, None)

    def test_apply_sets_http_only_cookies(self):
        jar = CookieJar({}, secure=True, domain=".example.com")
        jar.set("session_token", "abc", max_age=3600)

        response = jar.apply(RedirectResponse("https://example.com/", status_code=302))

        [header] = set_cookie_headers(response)
        assert header.startswith("session_token=abc;")
        assert "HttpOnly" in header
        assert "Max-Age=3600" in header
        assert "Path=/" in header
        assert "Domain=.example.com" in header
        assert "Secure" in header
        assert "SameSite=lax" in header

    def test_apply_deletes_cookies(self):
        jar = CookieJar({"steam-user": "x"})
        jar.delete("steam-user")

        response = jar.apply(Response())

        [header] = set_cookie_headers(response)
        assert header.startswith('steam-user="";')
        assert "Max-Age=0" in header

    def test_apply_without_writes_is_a_no_op(self):
        response = CookieJar({"a": "1"}).apply(Response())

        assert set_cookie_headers(response) == []
