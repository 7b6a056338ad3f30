# tests/test_legacy.py
import pytest

from riskmap.errors import InputValidationError
from riskmap.legacy import factors_from_legacy, is_legacy_shape, weights_from_legacy
from riskmap.services.scoring import compute_score

LEGACY = {
    "batDensity": 0.6,
    "pigDensity": 0.4,
    "fruitExposure": 0.7,
    "inverseHealthcare": 0.5,
    "urbanWildOverlap": 0.3,
}

def test_legacy_factors_map_onto_six_factor_model():
    f = factors_from_legacy(LEGACY)
    assert f.pig_farming_intensity == 0.4
    assert f.fruit_consumption_practices == 0.7
    assert f.environmental_degradation == 0.3
    assert f.human_population_density == 0.5
    assert is_legacy_shape(LEGACY)
    assert not is_legacy_shape({"batDensity": 0.1, "pigFarmingIntensity": 0.2})

def test_legacy_weights_reproduce_old_engine():
    f = factors_from_legacy(LEGACY)
    expected = 0.3 * 0.6 + 0.2 * 0.4 + 0.2 * 0.7 + 0.2 * (1 - 0.5) + 0.1 * 0.3
    assert compute_score(f, weights_from_legacy()) == pytest.approx(expected)

def test_missing_or_bad_legacy_field():
    with pytest.raises(InputValidationError) as exc:
        factors_from_legacy({k: v for k, v in LEGACY.items() if k != "pigDensity"})
    assert exc.value.field == "pigDensity"
    with pytest.raises(InputValidationError):
        factors_from_legacy({**LEGACY, "fruitExposure": "high"})

@pytest.mark.parametrize("value", [1.5, -0.2, float("nan"), float("inf")])
def test_legacy_factor_outside_unit_range_is_rejected(value):
    with pytest.raises(InputValidationError) as exc:
        factors_from_legacy({**LEGACY, "batDensity": value})
    assert exc.value.field == "batDensity"

def test_legacy_weights_must_be_finite_and_non_negative():
    with pytest.raises(InputValidationError):
        weights_from_legacy({"batDensity": -0.3, "pigDensity": 0.2, "fruitExposure": 0.2,
                             "inverseHealthcare": 0.2, "urbanWildOverlap": 0.1})
    with pytest.raises(InputValidationError):
        weights_from_legacy({"batDensity": float("inf"), "pigDensity": 0.2, "fruitExposure": 0.2,
                             "inverseHealthcare": 0.2, "urbanWildOverlap": 0.1})
    assert weights_from_legacy({"batDensity": 3, "pigDensity": 2, "fruitExposure": 2,
                                "inverseHealthcare": 2, "urbanWildOverlap": 1}).bat_density == 3.0
