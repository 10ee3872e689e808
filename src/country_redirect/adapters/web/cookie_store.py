"""Request-scoped cookie store collecting writes for the response."""

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime

from starlette.responses import Response


@dataclass(frozen=True)
class PendingCookie:
    """A cookie write (or removal, when value is None) to send with the response."""

    value: str | None
    expires_at: datetime | None = None


class RequestCookieStore:
    """Cookies of one request, with writes visible to later reads.

    Writes are remembered and applied to the outgoing response with
    ``apply_to``.
    """

    def __init__(
        self,
        cookies: Mapping[str, str],
        path: str = "/",
        secure: bool = False,
    ) -> None:
        self._cookies = dict(cookies)
        self._pending: dict[str, PendingCookie] = {}
        self._path = path
        self._secure = secure

    def get(self, name: str) -> str | None:
        return self._cookies.get(name) or None

    def set(self, name: str, value: str, expires_at: datetime) -> None:
        self._cookies[name] = value
        self._pending[name] = PendingCookie(value=value, expires_at=expires_at)

    def clear(self, name: str) -> None:
        self._cookies.pop(name, None)
        self._pending[name] = PendingCookie(value=None)

    @property
    def pending(self) -> dict[str, PendingCookie]:
        """Cookie writes made during this request, by name."""
        return dict(self._pending)

    def apply_to(self, response: Response) -> None:
        """Write pending cookie changes to a response."""
        for name, cookie in self._pending.items():
            if cookie.value is None:
                response.delete_cookie(name, path=self._path)
            else:
                response.set_cookie(
                    name,
                    cookie.value,
                    expires=cookie.expires_at,
                    path=self._path,
                    secure=self._secure,
                    samesite="lax",
                )
