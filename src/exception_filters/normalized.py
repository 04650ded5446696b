"""The normalized error value every filter produces."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

MIN_HTTP_STATUS = 100
MAX_HTTP_STATUS = 599


@dataclass(frozen=True)
class NormalizedError:
    """Status, title, code and optional details for one translated failure.

    ``headers`` is only populated by the transport filter, which forwards
    headers attached to the original HTTP exception (``WWW-Authenticate`` and
    the like).
    """

    status: int
    title: str
    code: str
    details: Any | None = None
    headers: Mapping[str, str] | None = None

    def __post_init__(self) -> None:
        if not MIN_HTTP_STATUS <= self.status <= MAX_HTTP_STATUS:
            raise ValueError(f"HTTP status {self.status} is outside {MIN_HTTP_STATUS}-{MAX_HTTP_STATUS}.")
        if not self.code:
            raise ValueError("Normalized errors require a non-empty code.")

    @property
    def is_server_error(self) -> bool:
        return self.status >= 500


__all__ = ["NormalizedError"]
