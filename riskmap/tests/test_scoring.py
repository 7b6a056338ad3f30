# tests/test_scoring.py
import pytest

from riskmap.errors import ConfigurationWarning
from riskmap.schemas import ALTERNATE_WEIGHTS, DEFAULT_WEIGHTS, FACTOR_NAMES, RiskFactorSet, WeightProfile
from riskmap.services.scoring import (
    check_weights, classify, color_for, compute_score, recommendation_for,
)

ALL_ZERO = {name: 0.0 for name in FACTOR_NAMES}

def test_reference_scenario_scores_0_515(scenario_factors):
    assert compute_score(scenario_factors, DEFAULT_WEIGHTS) == pytest.approx(0.515)

def test_default_weights_used_when_none(scenario_factors):
    assert compute_score(scenario_factors) == compute_score(scenario_factors, DEFAULT_WEIGHTS)

def test_score_stays_in_range_at_extremes():
    for v in (0.0, 1.0):
        f = RiskFactorSet(**{name: v for name in FACTOR_NAMES})
        for weights in (DEFAULT_WEIGHTS, ALTERNATE_WEIGHTS):
            assert 0.0 <= compute_score(f, weights) <= 1.0
            assert 0.0 <= compute_score(f, weights, base_risk_score=1.0) <= 1.0

def test_risk_positive_factors_are_monotonic(scenario_factors):
    base = compute_score(scenario_factors)
    for name in FACTOR_NAMES:
        if name == "healthcare_infrastructure":
            continue
        raised = scenario_factors.with_value(name, scenario_factors.value_of(name) + 0.2)
        assert compute_score(raised) > base

def test_healthcare_is_inverted():
    poor = RiskFactorSet(**ALL_ZERO)
    good = RiskFactorSet(**{**ALL_ZERO, "healthcare_infrastructure": 1.0})
    assert compute_score(good) < compute_score(poor)
    assert compute_score(good) == 0.0
    assert compute_score(poor) == pytest.approx(0.15)

def test_base_score_blend(scenario_factors):
    raw = compute_score(scenario_factors)
    blended = compute_score(scenario_factors, base_risk_score=0.72)
    assert blended == pytest.approx(0.7 * raw + 0.3 * 0.72)

def test_weights_are_normalized_by_their_sum(scenario_factors):
    doubled = WeightProfile(**{name: w * 2 for name, w in DEFAULT_WEIGHTS.items()})
    assert compute_score(scenario_factors, doubled) == pytest.approx(0.515)

def test_zero_weights_score_zero(scenario_factors):
    zero = WeightProfile(**{name: 0.0 for name in FACTOR_NAMES})
    assert compute_score(scenario_factors, zero) == 0.0

def test_out_of_range_values_are_clamped_before_weighting():
    # model_construct skips validation, so the engine sees raw values
    f = RiskFactorSet.model_construct(**{**ALL_ZERO, "bat_density": 5.0})
    assert compute_score(f) == pytest.approx(0.25 + 0.15)

def test_trace_hook_sees_every_weighting_step(scenario_factors):
    steps = []
    score = compute_score(scenario_factors, trace=steps.append)
    assert [s.factor for s in steps] == list(FACTOR_NAMES)
    assert sum(s.contribution for s in steps) == pytest.approx(score)
    hc = next(s for s in steps if s.factor == "healthcare_infrastructure")
    assert hc.contribution == pytest.approx(0.15 * (1 - 0.5))

@pytest.mark.parametrize("score,label", [
    (0.9, "high"), (0.56, "high"), (0.55, "medium"), (0.45, "medium"), (0.44, "low"), (0.0, "low"),
])
def test_classify(score, label):
    assert classify(score) == label

def test_recommendation_and_color():
    assert recommendation_for(0.8) == "Immediate intervention required"
    assert recommendation_for(0.1) == "Continue routine surveillance"
    assert color_for(0.85) == "#b71c1c"
    assert color_for(0.65) == "#f44336"
    assert color_for(0.35) == "#ff9800"
    assert color_for(0.1) == "#4caf50"

def test_check_weights_accepts_reference_profiles():
    assert check_weights(DEFAULT_WEIGHTS) == []
    assert check_weights(ALTERNATE_WEIGHTS) == []
    assert DEFAULT_WEIGHTS.is_valid()

def test_check_weights_warns_but_does_not_block(scenario_factors):
    heavy = WeightProfile(**{name: 0.5 for name in FACTOR_NAMES})
    with pytest.warns(ConfigurationWarning):
        messages = check_weights(heavy)
    assert messages and "3.000" in messages[0]
    assert 0.0 <= compute_score(scenario_factors, heavy) <= 1.0

def test_check_weights_flags_negative_weights():
    w = WeightProfile(bat_density=0.35, environmental_degradation=-0.1)
    with pytest.warns(ConfigurationWarning):
        messages = check_weights(w)
    assert any("environmental_degradation" in m for m in messages)

def test_non_positive_weight_sum_scores_zero(scenario_factors):
    w = WeightProfile(**{**{name: 0.0 for name in FACTOR_NAMES}, "bat_density": -1.0})
    assert compute_score(scenario_factors, w) == 0.0

def test_check_weights_flags_non_finite_total():
    w = WeightProfile(bat_density=float("nan"))
    with pytest.warns(ConfigurationWarning):
        messages = check_weights(w)
    assert any("finite" in m for m in messages)
