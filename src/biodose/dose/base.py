from __future__ import annotations

"""Dose model protocol and registry."""

from dataclasses import dataclass
from importlib import import_module
from typing import Callable, Dict, List, Protocol, runtime_checkable

from ..errors import UnknownDoseModelError
from ..types import CurrentValues, HistoricalValues


@runtime_checkable
class DoseModel(Protocol):
    """Protocol describing a dose model.

    A dose model turns the timing and biometric context of one sample into a
    recommended dose.  Implementations must be pure: the same arguments give
    the same result and nothing passed in is modified.
    """

    name: str

    def calculate(
        self,
        base_dose: float,
        remaining_hours: float,
        target_hour: float,
        historical: HistoricalValues,
        current: CurrentValues,
    ) -> float:
        """Return the dose for a single sample.

        Parameters
        ----------
        base_dose:
            Baseline dose supplied by the caller.
        remaining_hours:
            Fractional hours from the sample to the target time.  May fall
            slightly outside ``[0, 24)``.
        target_hour:
            Target time of day as a fractional hour.
        historical:
            Full value arrays of the three series.
        current:
            Values of the sample being dosed.
        """


DoseFunction = Callable[[float, float, float, HistoricalValues, CurrentValues], float]


@dataclass(frozen=True)
class FunctionDoseModel:
    """Adapt a plain function to the :class:`DoseModel` protocol."""

    name: str
    func: DoseFunction

    def calculate(
        self,
        base_dose: float,
        remaining_hours: float,
        target_hour: float,
        historical: HistoricalValues,
        current: CurrentValues,
    ) -> float:
        return float(self.func(base_dose, remaining_hours, target_hour, historical, current))


_registry: Dict[str, DoseModel] = {}


def register_dose_model(model: DoseModel) -> None:
    """Register ``model`` in the global registry."""
    validate_dose_model(model)
    _registry[model.name] = model


def get_dose_model(name: str) -> DoseModel:
    """Retrieve a dose model by ``name``."""
    try:
        return _registry[name]
    except KeyError:
        raise UnknownDoseModelError(name, available_dose_models()) from None


def available_dose_models() -> List[str]:
    """Return the list of registered dose model names."""
    return list(_registry)


def validate_dose_model(model: object) -> None:
    """Validate that ``model`` satisfies the :class:`DoseModel` protocol."""
    if not isinstance(model, DoseModel):
        raise TypeError("Dose model does not implement the required protocol")


def load_dose_model(spec: str) -> DoseModel:
    """Resolve ``spec`` to a dose model.

    ``spec`` is either a registered name or a ``package.module:attribute``
    path.  The attribute may be a :class:`DoseModel` instance, a class
    implementing it (instantiated without arguments) or a plain function.
    """

    if ":" not in spec:
        return get_dose_model(spec)

    module_name, _, attr = spec.partition(":")
    if not module_name or not attr:
        raise ValueError(f"dose model path must look like 'module:attribute', got {spec!r}")
    target = getattr(import_module(module_name), attr)
    if isinstance(target, type):
        target = target()
    if isinstance(target, DoseModel):
        return target
    if callable(target):
        return FunctionDoseModel(name=spec, func=target)
    raise TypeError(f"{spec!r} is neither a dose model nor a callable")
