"""Component registration entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class RegistrationOutcome(str, Enum):
    """Result of registering one named component schema."""

    INSERTED = "inserted"
    ALREADY_EXISTS = "already_exists"


@dataclass(frozen=True)
class ComponentRegistration:
    """Outcome of registering one dependency under its name."""

    name: str
    outcome: RegistrationOutcome

    @property
    def is_collision(self) -> bool:
        return self.outcome == RegistrationOutcome.ALREADY_EXISTS
