import pytest

from core import state


def fresh():
    ss = {}
    state.init_state(ss)
    return ss


def test_init_state_defaults():
    ss = fresh()
    assert ss["turnover"] == 100000.0
    assert ss["sell_rate"] == 1.0
    assert ss["turnover_input"] == "100000"


def test_init_state_keeps_existing_values():
    ss = {"turnover": 5000.0, "turnover_input": "5000"}
    state.init_state(ss)
    assert ss["turnover"] == 5000.0
    assert ss["turnover_input"] == "5000"


def test_negative_turnover_keeps_previous_value():
    ss = fresh()
    ss["turnover_input"] = "-50"
    assert state.apply_turnover_input(ss) == 100000.0
    assert ss["turnover"] == 100000.0
    assert ss["turnover_input"] == "100000"


def test_unparsable_turnover_keeps_previous_value():
    ss = fresh()
    ss["turnover_input"] = "lots"
    state.apply_turnover_input(ss)
    assert ss["turnover"] == 100000.0
    assert ss["turnover_input"] == "100000"


def test_valid_turnover_replaces_value():
    ss = fresh()
    ss["turnover_input"] = "250000"
    assert state.apply_turnover_input(ss) == 250000.0
    assert ss["turnover_input"] == "250000"


def test_current_breakdown_uses_session_values():
    ss = fresh()
    ss["turnover"] = 200000.0
    ss["sell_rate"] = 1.2000000000000002
    inputs = state.current_inputs(ss)
    assert inputs.sell_rate == 1.2
    res = state.current_breakdown(ss)
    assert res.yearly_profit == pytest.approx(200000 * 0.009 * 0.45)
