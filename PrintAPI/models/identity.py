"""
Identity capability composed into objects sent between processes.

The messaging layer needs every sendable object to carry a unique id. Instead
of inheriting it from a base class, objects hold a SendableId obtained from
an IdentityProvider that the caller may inject.
"""
import uuid
from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class SendableId:
    """Unique identifier of a sendable object instance."""
    id: str

    def __str__(self) -> str:
        return self.id


class IdentityProvider(Protocol):
    """Supplies fresh identities for newly constructed objects."""

    def new_identity(self) -> SendableId:
        ...


class UuidIdentityProvider:
    """Default provider, one random UUID4 per identity."""

    def new_identity(self) -> SendableId:
        return SendableId(str(uuid.uuid4()))


default_identity_provider = UuidIdentityProvider()
