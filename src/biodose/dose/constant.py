from .base import register_dose_model
from ..types import CurrentValues, HistoricalValues


class ConstantDoseModel:
    """Recommend the base dose for every sample."""

    name = "constant"

    def calculate(
        self,
        base_dose: float,
        remaining_hours: float,
        target_hour: float,
        historical: HistoricalValues,
        current: CurrentValues,
    ) -> float:
        return float(base_dose)


register_dose_model(ConstantDoseModel())
