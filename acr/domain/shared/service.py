"""Base class for stateful domain services such as the registry."""

from dataclasses import dataclass, fields
from typing import dataclass_transform


@dataclass_transform()
class _ServiceMeta(type):
    """Metaclass that applies @dataclass to subclasses, keeping Service.__repr__."""

    def __new__(mcs, name: str, bases: tuple, namespace: dict):
        cls = super().__new__(mcs, name, bases, namespace)
        if any(isinstance(b, mcs) for b in bases):
            return dataclass(cls, repr=False)
        return cls


class Service(metaclass=_ServiceMeta):
    """Base class for domain services. Subclasses are automatically dataclasses.

    Fields whose names start with an underscore hold internal state and are
    left out of ``repr``.
    """

    def __repr__(self) -> str:
        public = ", ".join(
            f"{f.name}={getattr(self, f.name)!r}" for f in fields(self) if not f.name.startswith("_")
        )
        return f"{type(self).__name__}({public})"
