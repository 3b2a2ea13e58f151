"""
End-to-end billing through the engine, the default requests and main().
"""
import pytest

from plan_billing.config.settings import Settings
from plan_billing.engine import (
    BillingEngine, BillingRequest, PlanCategory, PlanFactory, DEFAULT_REQUESTS,
)
from plan_billing.engine.billing_engine import main
from plan_billing.engine.errors import InvalidQuantityError
from plan_billing.engine.models import MAX_QUANTITY


@pytest.mark.parametrize("category,quantity,rate,amount_text", [
    (PlanCategory.DOMESTIC, 98, 3.50, "343.0"),
    (PlanCategory.COMMERCIAL, 204, 7.50, "1530.0"),
    (PlanCategory.INSTITUTIONAL, 465, 5.50, "2557.5"),
])
def test_reference_scenarios(engine, category, quantity, rate, amount_text):
    result = engine.calculate(BillingRequest(quantity=quantity, category=category))
    assert result.rate == rate
    assert result.amount_text == amount_text
    assert result.to_line() == (
        f"Bill for your {category.label} plan with {quantity} unit(s) consumed is Rs. {amount_text}"
    )


def test_run_keeps_request_order(engine):
    results = engine.run(DEFAULT_REQUESTS)
    assert [r.category for r in results] == [
        PlanCategory.DOMESTIC, PlanCategory.COMMERCIAL, PlanCategory.INSTITUTIONAL,
    ]
    assert [r.amount for r in results] == [343.0, 1530.0, 2557.5]


def test_report_emits_one_line_per_request(engine):
    lines = []
    engine.report(DEFAULT_REQUESTS, out=lines.append)
    assert lines == [
        "Bill for your Domestic plan with 98 unit(s) consumed is Rs. 343.0",
        "Bill for your Commercial plan with 204 unit(s) consumed is Rs. 1530.0",
        "Bill for your Institutional plan with 465 unit(s) consumed is Rs. 2557.5",
    ]


def test_zero_quantity(engine):
    result = engine.calculate(BillingRequest(quantity=0, category=PlanCategory.COMMERCIAL))
    assert result.amount == 0
    assert result.amount_text == "0.0"


def test_trace_records_resolution(engine):
    result = engine.calculate(BillingRequest(quantity=98, category=PlanCategory.DOMESTIC))
    steps = [t.step for t in result.trace]
    assert steps == ["Plan Lookup", "Rate", "Extension"]
    assert "DomesticPlan" in result.get_trace_text()


def test_fixed_style_from_settings(factory):
    settings = Settings(amount_style='fixed')
    engine = BillingEngine(factory=factory, settings=settings)
    result = engine.calculate(BillingRequest(quantity=98, category=PlanCategory.DOMESTIC))
    assert result.to_line().endswith("Rs. 343.00")


def test_settings_reject_unknown_amount_style():
    with pytest.raises(ValueError):
        Settings(amount_style='rounded')


def test_engine_defaults_to_shared_factory(settings):
    assert BillingEngine(settings=settings).factory is PlanFactory.shared()


@pytest.mark.parametrize("quantity", [-1, 2.5, "10", True])
def test_request_rejects_bad_quantity(quantity):
    with pytest.raises(InvalidQuantityError):
        BillingRequest(quantity=quantity, category=PlanCategory.DOMESTIC)


def test_main_prints_default_bills(capsys):
    main([])
    out = capsys.readouterr().out.strip().splitlines()
    assert out == [
        "Bill for your Domestic plan with 98 unit(s) consumed is Rs. 343.0",
        "Bill for your Commercial plan with 204 unit(s) consumed is Rs. 1530.0",
        "Bill for your Institutional plan with 465 unit(s) consumed is Rs. 2557.5",
    ]


def test_main_reads_csv(tmp_path, capsys):
    csv_path = tmp_path / 'requests.csv'
    csv_path.write_text("quantity,category\n10,commercial\n", encoding='utf-8')
    main([str(csv_path)])
    out = capsys.readouterr().out.strip().splitlines()
    assert out == ["Bill for your Commercial plan with 10 unit(s) consumed is Rs. 75.0"]


def test_main_reads_csv_from_environment(tmp_path, monkeypatch, capsys):
    csv_path = tmp_path / 'env_requests.csv'
    csv_path.write_text("quantity,category\n10,commercial\n", encoding='utf-8')
    monkeypatch.setenv('PLAN_BILLING_REQUESTS_CSV', str(csv_path))

    main([])
    out = capsys.readouterr().out.strip().splitlines()
    assert out == ["Bill for your Commercial plan with 10 unit(s) consumed is Rs. 75.0"]


def test_command_line_csv_wins_over_environment(tmp_path, monkeypatch, capsys):
    env_csv = tmp_path / 'env.csv'
    env_csv.write_text("quantity,category\n10,commercial\n", encoding='utf-8')
    cli_csv = tmp_path / 'cli.csv'
    cli_csv.write_text("quantity,category\n2,domestic\n", encoding='utf-8')
    monkeypatch.setenv('PLAN_BILLING_REQUESTS_CSV', str(env_csv))

    main([str(cli_csv)])
    out = capsys.readouterr().out.strip().splitlines()
    assert out == ["Bill for your Domestic plan with 2 unit(s) consumed is Rs. 7.0"]


def test_settings_load_from_environment(tmp_path, monkeypatch):
    monkeypatch.setenv('PLAN_BILLING_REQUESTS_CSV', str(tmp_path / 'x.csv'))
    monkeypatch.setenv('PLAN_BILLING_AMOUNT_STYLE', ' Fixed ')
    loaded = Settings.load()
    assert loaded.requests_csv == tmp_path / 'x.csv'
    assert loaded.amount_style == 'fixed'


def test_settings_without_environment():
    loaded = Settings.load()
    assert loaded.requests_csv is None
    assert loaded.amount_style == 'raw'


@pytest.mark.parametrize("quantity", [MAX_QUANTITY + 1, 10 ** 30, 10 ** 400])
def test_request_rejects_oversized_quantity(quantity):
    with pytest.raises(InvalidQuantityError, match="must not exceed"):
        BillingRequest(quantity=quantity, category=PlanCategory.DOMESTIC)


def test_largest_quantity_bills(factory):
    settings = Settings(amount_style='fixed')
    engine = BillingEngine(factory=factory, settings=settings)
    result = engine.calculate(BillingRequest(quantity=MAX_QUANTITY, category=PlanCategory.COMMERCIAL))
    assert result.amount == 7.5 * MAX_QUANTITY
    assert result.amount_text == "7500000000000000.00"
