"""Session commands for login and logout."""

from pydantic import Field

from acr.domain.registry.service.registry import Registry
from acr.domain.shared.authorization.gate import public
from acr.domain.shared.command import Command, CommandHandler, Result


class Login(Command):
    """Command to open the global session."""

    username: str
    password: str = Field(repr=False)


class LoginResult(Result):
    """Result of a login attempt. A rejected login is not an error."""

    success: bool
    nickname: str | None = None


class LoginHandler(CommandHandler[Login, LoginResult]):
    __auth__ = public()
    registry: Registry

    def run(self, cmd: Login) -> LoginResult:
        success = self.registry.login(cmd.username, cmd.password)
        return LoginResult(
            success=success,
            nickname=self.registry.current_user() if success else None,
        )


class Logout(Command):
    """Command to close the global session."""


class LogoutResult(Result):
    nickname: str | None
    """Who was logged in before the call, if anyone."""


class LogoutHandler(CommandHandler[Logout, LogoutResult]):
    __auth__ = public()
    registry: Registry

    def run(self, cmd: Logout) -> LogoutResult:
        previous = self.registry.current_user()
        self.registry.logout()
        return LogoutResult(nickname=previous)
