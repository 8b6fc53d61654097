"""Component registration exports."""

from .component_registry import ComponentRegistry
from .registration_outcomes import ComponentRegistration, RegistrationOutcome

__all__ = ["ComponentRegistration", "ComponentRegistry", "RegistrationOutcome"]
