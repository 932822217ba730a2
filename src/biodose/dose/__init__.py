"""Dose model package providing the protocol, registry and built-in models."""

from importlib import import_module

from .base import (
    DoseModel,
    DoseFunction,
    FunctionDoseModel,
    register_dose_model,
    get_dose_model,
    available_dose_models,
    validate_dose_model,
    load_dose_model,
)

# Import built-in models to ensure registration
for _name in ["constant"]:
    import_module(f".{_name}", __name__)

__all__ = [
    "DoseModel",
    "DoseFunction",
    "FunctionDoseModel",
    "register_dose_model",
    "get_dose_model",
    "available_dose_models",
    "validate_dose_model",
    "load_dose_model",
]
