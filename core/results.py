# core/results.py
from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Union


class PersistenceErrorKind(enum.Enum):
    """Coarse classification of a storage fault, for logs only."""

    CONSTRAINT = "constraint"
    CONNECTIVITY = "connectivity"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class Success:
    """The mutation was stored.

    `redirect_to` is where the caller should send the user next; ``None``
    means "stay where you were" (used by delete).
    """

    redirect_to: str | None = None
    message: str = ""

    ok = True


@dataclass(frozen=True)
class Failure:
    """The mutation was rejected or could not be stored.

    `errors` maps a form field name to its messages (validation tier).
    `error_kind` is set only for storage faults; the user-facing `message`
    never carries storage details.
    """

    errors: dict[str, list[str]] = field(default_factory=dict)
    message: str = ""
    error_kind: PersistenceErrorKind | None = None

    ok = False

    @property
    def is_validation_error(self) -> bool:
        return bool(self.errors)


MutationResult = Union[Success, Failure]
