"""Session state shared between the login flow and the fetch layer."""

from dataclasses import dataclass, field
from typing import Protocol


class SessionStore(Protocol):
    """Where session cookies and the logged-in identity live."""

    def get_cookies(self) -> dict[str, str]: ...

    def set_cookies(self, cookies: dict[str, str]) -> None: ...

    def set_auth_token(self, token: str | None) -> None: ...

    def get_user_id(self) -> int | None: ...


@dataclass
class InMemorySessionStore:
    """Session store kept in process memory.

    Writers replace the cookie mapping wholesale; readers always get a copy,
    so a reader never sees a half-updated mapping.
    """

    cookies: dict[str, str] = field(default_factory=dict)
    auth_token: str | None = None
    user_id: int | None = None

    def get_cookies(self) -> dict[str, str]:
        return dict(self.cookies)

    def set_cookies(self, cookies: dict[str, str]) -> None:
        self.cookies = dict(cookies)

    def set_auth_token(self, token: str | None) -> None:
        self.auth_token = token

    def get_user_id(self) -> int | None:
        return self.user_id

    def set_user_id(self, user_id: int | None) -> None:
        self.user_id = user_id

    @property
    def is_authenticated(self) -> bool:
        return bool(self.auth_token and self.auth_token.strip())

    def clear(self) -> None:
        """Forget everything, e.g. after logout."""
        self.cookies = {}
        self.auth_token = None
        self.user_id = None
