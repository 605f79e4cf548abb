"""Command and CommandHandler base classes with authorization gate."""

from abc import ABCMeta, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from functools import wraps
from typing import Any, Generic, TypeVar, dataclass_transform

from pydantic import BaseModel

from acr.domain.shared.authorization.gate import Gate
from acr.domain.shared.error import ConfigurationError


class Command(BaseModel): ...


class Result(BaseModel): ...


C = TypeVar("C", bound=Command)
R = TypeVar("R", bound=Result)

# Unbound handler method: (self, cmd) -> Result
_HandlerMethod = Callable[..., Any]


def wrap_run_with_auth(original_run: _HandlerMethod) -> _HandlerMethod:
    """Wrap the run() method with __auth__ gate evaluation."""

    @wraps(original_run)
    def auth_wrapped_run(self: Any, cmd: Any) -> Any:
        auth_gate = getattr(type(self), "__auth__", None)
        if not isinstance(auth_gate, Gate):
            raise ConfigurationError(f"Handler {type(self).__name__} has no __auth__ declaration")

        registry = getattr(self, "registry", None)
        if registry is None:
            raise ConfigurationError(f"Handler {type(self).__name__} has no registry")

        auth_gate.enforce(registry, type(self).__name__)
        return original_run(self, cmd)

    return auth_wrapped_run


@dataclass_transform()
class HandlerMeta(ABCMeta):
    """Metaclass that combines ABC with auto-dataclass and __auth__ gate for subclasses."""

    def __new__(mcs, name: str, bases: tuple[type, ...], namespace: dict[str, Any]):
        cls = super().__new__(mcs, name, bases, namespace)
        if any(isinstance(b, mcs) for b in bases):
            cls = dataclass(cls)

            original_run = cls.__dict__.get("run")
            if original_run is not None:
                cls.run = wrap_run_with_auth(original_run)

        return cls


class CommandHandler(Generic[C, R], metaclass=HandlerMeta):
    """Base class for command handlers. Subclasses are automatically dataclasses.

    Declare __auth__ to enforce access against the registry session:
        class MyHandler(CommandHandler[MyCmd, MyResult]):
            __auth__ = requires_right(ADMIN_RIGHT)
            registry: Registry
    """

    @abstractmethod
    def run(self, cmd: C) -> R: ...
