"""Local registration, login and identity changes."""

import logging
import re
from datetime import timedelta
from typing import Callable

from ..clock import Clock
from ..errors import AuthenticationError, LoginChangeCooldownError, ValidationError
from ..models.profile import Profile, RegisteredUser

logger = logging.getLogger(__name__)

MIN_NAME_LENGTH = 5
LOGIN_CHANGE_COOLDOWN_DAYS = 14
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


class AccountService:
    """Manages the single local account stored on the profile.

    on_change is called after any change to a persisted field; on_logout
    after the user signs out.
    """

    def __init__(
        self,
        clock: Clock,
        profile: Profile,
        on_change: Callable[[], None] | None = None,
        on_logout: Callable[[], None] | None = None,
    ):
        self.clock = clock
        self.profile = profile
        self._on_change = on_change or (lambda: None)
        self._on_logout = on_logout or (lambda: None)

    def register(self, name: str, email: str, password: str) -> RegisteredUser:
        """Create the local account and sign in."""
        name = (name or "").strip()
        email = (email or "").strip()
        password = (password or "").strip()

        if len(name) < MIN_NAME_LENGTH:
            raise ValidationError("name", f"Login must be at least {MIN_NAME_LENGTH} characters.")
        if not EMAIL_PATTERN.match(email):
            raise ValidationError("email", "Enter a valid email address.")
        if not password:
            raise ValidationError("password", "Enter a password.")

        user = RegisteredUser(name=name, email=email, password=password)
        self.profile.registered_user = user
        self.profile.login_name = name
        self.profile.is_authenticated = True
        logger.info(f"Registered account {name}")
        self._on_change()
        return user

    def login(self, identifier: str, password: str) -> None:
        """Sign in with the registered name or email.

        Raises:
            AuthenticationError: if nobody is registered or credentials differ
        """
        user = self.profile.registered_user
        if user is None:
            raise AuthenticationError("Register first.")

        identifier = (identifier or "").strip()
        password = (password or "").strip()
        if not identifier:
            raise AuthenticationError("Enter your login or email.")
        if not password:
            raise AuthenticationError("Enter your password.")

        login_matches = (
            identifier == user.name or identifier.lower() == user.email.lower()
        )
        if not login_matches or password != user.password:
            logger.debug(f"Login rejected for {identifier}")
            raise AuthenticationError("Wrong login or password.")

        self.profile.login_name = user.name
        self.profile.is_authenticated = True
        logger.info(f"{user.name} signed in")
        self._on_change()

    def logout(self) -> None:
        self.profile.is_authenticated = False
        logger.info("Signed out")
        self._on_logout()

    def login_change_days_left(self) -> int:
        """Days until the login name may be changed again (0 if allowed now)."""
        last = self.profile.last_login_change
        if last is None:
            return 0
        elapsed = (self.clock.now() - last) // timedelta(days=1)
        return max(0, LOGIN_CHANGE_COOLDOWN_DAYS - elapsed)

    def change_login(self, new_name: str) -> str:
        """Rename the display login, at most once per cooldown period."""
        new_name = (new_name or "").strip()
        if not new_name:
            raise ValidationError("login_name", "Enter a login.")

        days_left = self.login_change_days_left()
        if days_left > 0:
            raise LoginChangeCooldownError(days_left)

        self.profile.login_name = new_name
        self.profile.last_login_change = self.clock.now()
        logger.info(f"Login changed to {new_name}")
        self._on_change()
        return new_name

    def set_avatar(self, avatar_ref: str) -> None:
        self.profile.avatar_ref = (avatar_ref or "").strip()
        self._on_change()
