"""Once-only registration of named component schemas."""

from __future__ import annotations

import logging
from collections.abc import Iterable, MutableMapping
from typing import Any

from openapi_sketcher.schema_inference.schema_models import NamedSchema, Schema

from .registration_outcomes import ComponentRegistration, RegistrationOutcome

logger = logging.getLogger(__name__)


class ComponentRegistry:
    """Adds inferred schemas to a document's `components.schemas` mapping.

    A name already present is never overwritten: the first registered shape
    wins and later attempts are reported as collisions.
    """

    def __init__(self, schemas: MutableMapping[str, Any]) -> None:
        self._schemas = schemas

    def register(self, name: str, schema: Schema) -> RegistrationOutcome:
        if name in self._schemas:
            logger.warning("Schema already exists: %s", name)
            return RegistrationOutcome.ALREADY_EXISTS
        self._schemas[name] = schema.to_openapi()
        logger.debug("Registered component schema %s", name)
        return RegistrationOutcome.INSERTED

    def register_all(self, dependencies: Iterable[NamedSchema]) -> list[ComponentRegistration]:
        """Register dependencies in the order inference produced them."""
        return [
            ComponentRegistration(
                name=dependency.name,
                outcome=self.register(dependency.name, dependency.schema),
            )
            for dependency in dependencies
        ]
