import sys
import types

import numpy as np
import pytest

from biodose.dose import (
    DoseModel,
    FunctionDoseModel,
    available_dose_models,
    get_dose_model,
    load_dose_model,
    register_dose_model,
    validate_dose_model,
)
from biodose.errors import UnknownDoseModelError
from biodose.types import CurrentValues, HistoricalValues


def _context():
    arr = np.array([1.0, 2.0])
    return HistoricalValues(arr, arr, arr), CurrentValues(1.0, 60.0, 14.0)


def test_constant_model_registered():
    assert "constant" in available_dose_models()
    model = get_dose_model("constant")
    assert isinstance(model, DoseModel)
    historical, current = _context()
    assert model.calculate(3.0, 14.0, 22.0, historical, current) == 3.0


def test_unknown_model():
    with pytest.raises(UnknownDoseModelError) as excinfo:
        get_dose_model("missing")
    assert isinstance(excinfo.value, KeyError)
    assert "constant" in str(excinfo.value)


def test_register_custom_model():
    class HalfDose:
        name = "half-test"

        def calculate(self, base_dose, remaining_hours, target_hour, historical, current):
            return base_dose / 2

    register_dose_model(HalfDose())
    historical, current = _context()
    assert get_dose_model("half-test").calculate(3.0, 1.0, 22.0, historical, current) == 1.5


def test_register_rejects_non_model():
    with pytest.raises(TypeError):
        register_dose_model(object())
    with pytest.raises(TypeError):
        validate_dose_model(lambda *args: 1.0)


def test_function_dose_model_coerces_float():
    model = FunctionDoseModel("int", lambda *args: 2)
    historical, current = _context()
    result = model.calculate(3.0, 1.0, 22.0, historical, current)
    assert result == 2.0 and isinstance(result, float)


def test_load_dose_model_by_name():
    assert load_dose_model("constant") is get_dose_model("constant")


def test_load_dose_model_from_module_path(monkeypatch):
    module = types.ModuleType("fake_dose_formula")

    def calculate_dose(base_dose, remaining_hours, target_hour, historical, current):
        return base_dose + remaining_hours

    class ClassModel:
        name = "class-model"

        def calculate(self, base_dose, remaining_hours, target_hour, historical, current):
            return 0.0

    module.calculate_dose = calculate_dose
    module.ClassModel = ClassModel
    module.not_callable = 5
    monkeypatch.setitem(sys.modules, "fake_dose_formula", module)

    historical, current = _context()
    fn_model = load_dose_model("fake_dose_formula:calculate_dose")
    assert fn_model.name == "fake_dose_formula:calculate_dose"
    assert fn_model.calculate(3.0, 2.0, 22.0, historical, current) == 5.0
    assert load_dose_model("fake_dose_formula:ClassModel").name == "class-model"
    with pytest.raises(TypeError):
        load_dose_model("fake_dose_formula:not_callable")
    with pytest.raises(AttributeError):
        load_dose_model("fake_dose_formula:missing")
    with pytest.raises(ValueError):
        load_dose_model("fake_dose_formula:")
