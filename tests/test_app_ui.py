from pathlib import Path

from streamlit.testing.v1 import AppTest

APP_PATH = str(Path(__file__).resolve().parents[1] / "app.py")


def run_app():
    at = AppTest.from_file(APP_PATH, default_timeout=30)
    at.run()
    assert not at.exception
    return at


def metric_value(at, label):
    return next(m.value for m in at.metric if m.label == label)


def test_default_breakdown_rendered():
    at = run_app()
    assert metric_value(at, "First 6 Months (30%)") == "$210.00"
    assert metric_value(at, "Second 6 Months (15%)") == "$105.00"
    assert metric_value(at, "Total Yearly Profit") == "$315.00"
    assert metric_value(at, "Buy Rate (Fixed)") == "0.3%"
    assert metric_value(at, "Rate Difference") == "0.7%"
    captions = [c.value for c in at.caption]
    assert "30% × $100,000.00 × 0.70%" in captions
    assert "15% × $100,000.00 × 0.70%" in captions


def test_turnover_change_recomputes():
    at = run_app()
    at.text_input(key="turnover_input").input("200000").run()
    assert at.session_state["turnover"] == 200000.0
    assert metric_value(at, "First 6 Months (30%)") == "$420.00"
    assert metric_value(at, "Total Yearly Profit") == "$630.00"


def test_negative_turnover_is_silently_ignored():
    at = run_app()
    at.text_input(key="turnover_input").input("-50").run()
    assert at.session_state["turnover"] == 100000.0
    assert at.text_input(key="turnover_input").value == "100000"
    assert len(at.error) == 0
    assert metric_value(at, "Total Yearly Profit") == "$315.00"


def test_sell_rate_slider_recomputes():
    at = run_app()
    at.slider(key="sell_rate").set_value(2.0).run()
    assert metric_value(at, "Rate Difference") == "1.7%"
    assert metric_value(at, "First 6 Months (30%)") == "$510.00"
    assert metric_value(at, "Total Yearly Profit") == "$765.00"


def test_zero_turnover_shows_zero_profit():
    at = run_app()
    at.text_input(key="turnover_input").input("0").run()
    assert metric_value(at, "Total Yearly Profit") == "$0.00"
