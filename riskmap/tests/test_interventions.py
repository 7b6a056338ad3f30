# tests/test_interventions.py
import pytest

from riskmap.catalog import get_intervention
from riskmap.schemas import ActiveIntervention, Impact, Intervention, RiskFactorSet, SeasonalEvent, activate
from riskmap.services.interventions import apply_interventions, apply_seasonal_effects
from riskmap.services.scoring import compute_score

def _iv(parameter, effect, applied_at=1, id="iv"):
    return ActiveIntervention(id=id, name=id, impact=Impact(parameter=parameter, effect=effect), applied_at=applied_at)

def test_empty_list_returns_equal_factors(scenario_factors):
    assert apply_interventions(scenario_factors, []) == scenario_factors

def test_pig_farm_biosecurity_lowers_score(scenario_factors):
    biosecurity = get_intervention("pig-quarantine")
    out = apply_interventions(scenario_factors, [biosecurity])
    assert out.pig_farming_intensity == pytest.approx(0.2)
    assert compute_score(out) < compute_score(scenario_factors)
    assert compute_score(scenario_factors) == pytest.approx(0.515)

def test_input_is_not_mutated(scenario_factors):
    before = scenario_factors.model_dump()
    apply_interventions(scenario_factors, [_iv("bat_density", -0.3)])
    assert scenario_factors.model_dump() == before

def test_effects_clamp_at_bounds():
    f = RiskFactorSet(bat_density=0.1, environmental_degradation=0.9)
    out = apply_interventions(f, [_iv("bat_density", -0.5), _iv("environmental_degradation", 0.5)])
    assert out.bat_density == 0.0
    assert out.environmental_degradation == 1.0

def test_healthcare_always_improves():
    f = RiskFactorSet(healthcare_infrastructure=0.5)
    out = apply_interventions(f, [_iv("healthcare_infrastructure", -0.2)])
    assert out.healthcare_infrastructure == pytest.approx(0.7)

def test_same_factor_effects_accumulate_in_order():
    f = RiskFactorSet(bat_density=0.1)
    # clamps to 0 after the first, then adds back
    out = apply_interventions(f, [_iv("bat_density", -0.3), _iv("bat_density", 0.2)])
    assert out.bat_density == pytest.approx(0.2)

def test_camel_case_target_is_resolved():
    out = apply_interventions(RiskFactorSet(), [_iv("fruitConsumptionPractices", -0.15)])
    assert out.fruit_consumption_practices == pytest.approx(0.35)

def test_unknown_target_is_ignored(scenario_factors):
    out = apply_interventions(scenario_factors, [_iv("monkeyDensity", -0.5), _iv("bat_density", -0.1)])
    assert out.bat_density == pytest.approx(0.5)
    assert out.pig_farming_intensity == scenario_factors.pig_farming_intensity

def test_temporal_gating_skips_pending_interventions():
    f = RiskFactorSet()
    ivs = [_iv("bat_density", -0.1, applied_at=3), _iv("pig_farming_intensity", -0.1, applied_at=6)]
    at_4 = apply_interventions(f, ivs, current_time=4)
    assert at_4.bat_density == pytest.approx(0.4)
    assert at_4.pig_farming_intensity == 0.5
    # without a current time everything is active
    assert apply_interventions(f, ivs).pig_farming_intensity == pytest.approx(0.4)

def test_plain_intervention_counts_as_month_one():
    plain = Intervention(id="x", name="X", impact=Impact(parameter="bat_density", effect=-0.1))
    assert apply_interventions(RiskFactorSet(), [plain], current_time=1).bat_density == pytest.approx(0.4)

def test_activate_pins_month():
    active = activate(get_intervention("health-camps"), applied_at=4)
    assert active.applied_at == 4
    assert activate(active).applied_at == 1

def test_seasonal_effects_only_in_their_months():
    monsoon = SeasonalEvent(id="m", name="Monsoon", months=[6, 7, 8], affects=Impact(parameter="batDensity", effect=0.15))
    f = RiskFactorSet()
    assert apply_seasonal_effects(f, [monsoon], 7).bat_density == pytest.approx(0.65)
    assert apply_seasonal_effects(f, [monsoon], 9) == f

def test_seasonal_event_months_validated():
    with pytest.raises(ValueError):
        SeasonalEvent(id="bad", name="Bad", months=[0, 13], affects=Impact(parameter="bat_density", effect=0.1))
