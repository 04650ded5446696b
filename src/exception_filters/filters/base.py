"""The uniform contract every exception filter implements."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

from ..normalized import NormalizedError

VariantT = TypeVar("VariantT")


class ExceptionFilter(ABC, Generic[VariantT]):
    """Claim one category of failure and translate it into a ``NormalizedError``.

    Subclasses provide a boundary adapter (``describe``) that recognizes their
    collaborator's exceptions and a rule set (``translate``) that maps the
    recognized variant. ``attempt`` returns ``None`` for anything the adapter
    does not recognize. Filters must be total over what they recognize: an
    exception escaping ``translate`` is a defect in the filter.
    """

    #: Exception classes the host framework must route to the chain for this filter.
    catches: tuple[type[Exception], ...] = ()

    @property
    def name(self) -> str:
        return type(self).__name__

    @abstractmethod
    def describe(self, failure: Exception) -> VariantT | None:
        """Return the tagged variant for ``failure`` or ``None``."""

    @abstractmethod
    def translate(self, variant: VariantT) -> NormalizedError:
        """Map a recognized variant to its normalized error."""

    def attempt(self, failure: Exception, request: Any) -> NormalizedError | None:
        """Translate ``failure`` if this filter recognizes it.

        ``request`` is accepted for signature parity with the chain and is never
        inspected.
        """

        variant = self.describe(failure)
        if variant is None:
            return None
        return self.translate(variant)

    def __repr__(self) -> str:
        return f"{self.name}()"


__all__ = ["ExceptionFilter"]
