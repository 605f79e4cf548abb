"""Query and QueryHandler base classes with authorization gate."""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, ClassVar, Generic, TypeVar

from pydantic import BaseModel

from acr.domain.shared.command import HandlerMeta

if TYPE_CHECKING:
    from acr.domain.shared.authorization.gate import Gate


class Query(BaseModel): ...


class Result(BaseModel): ...


Q = TypeVar("Q", bound=Query)
R = TypeVar("R", bound=Result)


class QueryHandler(Generic[Q, R], metaclass=HandlerMeta):
    """Base class for query handlers. Subclasses are automatically dataclasses.

    Declare __auth__ to enforce access against the registry session:
        class MyHandler(QueryHandler[MyQuery, MyResult]):
            __auth__ = authenticated()
            registry: Registry
    """

    __auth__: ClassVar[Gate]

    @abstractmethod
    def run(self, query: Q) -> R: ...
