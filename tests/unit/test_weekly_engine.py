"""
Weekly engine tests.

Covers the reference scenarios, the R&D consistency rule, funding inputs
threaded through the engine, and fail-fast validation.
"""

from __future__ import annotations

from dataclasses import FrozenInstanceError, replace

import pytest

from innoquest.components.weekly import (
    WeeklyDecisionInput,
    build_audit_record,
    compute_weekly_result,
    run,
    validate_decision,
)
from innoquest.domain.entities import GameConfiguration
from innoquest.domain.errors import InvalidConfiguration


@pytest.fixture
def decision() -> WeeklyDecisionInput:
    """Scenario A: product 1 at the anchor price, no R&D, no analytics."""
    return WeeklyDecisionInput(
        product_id=1,
        set_price=99,
        current_funding_stage="Pre-Seed",
        rnd_tier=None,
        analytics_purchased=False,
        current_customer_count=0,
        successful_rnd_tests=0,
        avg_purchase_probability=0.5,
    )


class TestReferenceScenarios:
    def test_scenario_a(self, config: GameConfiguration, decision, scripted) -> None:
        result = compute_weekly_result(decision, config, scripted())

        assert result.price_multiplier == 1.0
        assert result.demand == 2400
        assert result.revenue == 237600
        assert result.cogs_cost == pytest.approx(83160)
        assert result.operating_cost == 21200
        assert result.rnd_cost == 0
        assert result.analytics_cost == 0
        assert result.total_costs == pytest.approx(104360)
        assert result.profit == pytest.approx(133240)
        assert result.rnd_tested is False
        assert result.rnd_success is False
        assert result.rnd_multiplier == 1.0

    def test_scenario_b_price_clamp(self, config: GameConfiguration, decision, scripted) -> None:
        result = compute_weekly_result(replace(decision, set_price=198), config, scripted())

        assert result.price_multiplier == 1.5
        assert result.demand == 3600
        assert result.revenue == 712800

    def test_scenario_c_rnd_failure(self, config: GameConfiguration, decision, scripted) -> None:
        """Basic tier resolved as failure: 0.8 penalty and the 5000 cost still paid."""
        result = compute_weekly_result(replace(decision, rnd_tier="basic"), config, scripted(0.95))

        assert result.rnd_tested is True
        assert result.rnd_success is False
        assert result.rnd_multiplier == 0.8
        assert result.rnd_cost == 5000
        assert result.demand == 1920
        assert result.total_costs == pytest.approx(
            result.cogs_cost + result.operating_cost + 5000
        )

    def test_scenario_d_funding_pass(self, config: GameConfiguration, decision, scripted) -> None:
        result = compute_weekly_result(decision, config, scripted())

        assert result.pass_fail_status == "pass"
        assert result.bonus == 11880
        assert result.qualifies_for_next_stage is True
        assert result.next_funding_stage == "Seed"

    def test_rnd_success_boosts_demand(self, config: GameConfiguration, decision, scripted) -> None:
        result = compute_weekly_result(replace(decision, rnd_tier="basic"), config, scripted(0.1))

        assert result.rnd_success is True
        assert result.rnd_multiplier == 1.25
        assert result.demand == 3000
        assert result.rnd_success_probability == 0.7


class TestFundingInputs:
    """The funding evaluator receives the team's real stage and counter."""

    def test_uses_current_stage(self, config: GameConfiguration, decision, scripted) -> None:
        """Scenario A numbers fail Series A (revenue and R&D short)."""
        result = compute_weekly_result(
            replace(decision, current_funding_stage="Series A"), config, scripted()
        )

        assert result.pass_fail_status == "fail"
        assert result.bonus == 0
        assert result.qualifies_for_next_stage is False
        assert result.next_funding_stage == "Series A"

    def test_uses_real_counter(self, config: GameConfiguration, decision, scripted) -> None:
        """Seed needs 1 success: a counter of 1 passes, 0 fails."""
        seed = replace(decision, set_price=198, current_funding_stage="Seed")

        assert compute_weekly_result(seed, config, scripted()).pass_fail_status == "fail"
        passed = compute_weekly_result(replace(seed, successful_rnd_tests=1), config, scripted())
        assert passed.pass_fail_status == "pass"
        assert passed.next_funding_stage == "Series A"

    def test_this_weeks_success_counts(self, config: GameConfiguration, decision, scripted) -> None:
        seed = replace(decision, set_price=198, current_funding_stage="Seed", rnd_tier="basic")
        result = compute_weekly_result(seed, config, scripted(0.1))

        assert result.rnd_success is True
        assert result.pass_fail_status == "pass"


class TestAnalyticsAndOverrides:
    def test_analytics_purchase_cost(self, config: GameConfiguration, decision, scripted) -> None:
        result = compute_weekly_result(
            replace(decision, analytics_purchased=True), config, scripted()
        )

        assert result.analytics_cost == 2000
        assert result.profit == pytest.approx(131240)

    def test_analytics_quantity(self, config: GameConfiguration, decision, scripted) -> None:
        result = compute_weekly_result(
            replace(decision, analytics_purchased=True, analytics_quantity=2),
            config,
            scripted(),
        )
        assert result.analytics_cost == 4000

    def test_profit_bonus_multiplier(self, config: GameConfiguration, decision, scripted) -> None:
        """The admin grant doubles profit; demand, revenue and the funding bonus stay put."""
        plain = compute_weekly_result(decision, config, scripted())
        boosted = compute_weekly_result(
            replace(decision, profit_bonus_multiplier=2.0), config, scripted()
        )

        assert boosted.demand == plain.demand == 2400
        assert boosted.revenue == plain.revenue == 237600
        assert boosted.total_costs == pytest.approx(plain.total_costs)
        assert boosted.profit == 266480
        assert boosted.bonus == plain.bonus == 11880
        assert boosted.profit_bonus_multiplier_applied == 2.0
        assert plain.profit_bonus_multiplier_applied is None

    def test_profit_bonus_does_not_buy_funding(
        self, config: GameConfiguration, decision, scripted
    ) -> None:
        """Product 3 at 49.5: demand 900, revenue 44550, short of Pre-Seed."""
        result = compute_weekly_result(
            replace(decision, product_id=3, set_price=49.5, profit_bonus_multiplier=3.0),
            config,
            scripted(),
        )

        assert result.demand == 900
        assert result.revenue == pytest.approx(44550)
        assert result.pass_fail_status == "fail"
        assert result.bonus == 0

    def test_avg_purchase_probability_not_used(
        self, config: GameConfiguration, decision, scripted
    ) -> None:
        low = compute_weekly_result(
            replace(decision, avg_purchase_probability=0.0), config, scripted()
        )
        high = compute_weekly_result(
            replace(decision, avg_purchase_probability=1.0), config, scripted()
        )
        assert low == high


class TestValidation:
    """Errors are raised before any step runs."""

    @pytest.mark.parametrize(
        ("changes", "code", "field"),
        [
            ({"product_id": 99}, "unknown_product", "product_id"),
            ({"rnd_tier": "platinum"}, "unknown_rnd_tier", "rnd_tier"),
            ({"current_funding_stage": "Series Z"}, "unknown_funding_stage", "current_funding_stage"),
            ({"set_price": 0}, "invalid_input", "set_price"),
            ({"set_price": -5}, "invalid_input", "set_price"),
            ({"set_price": float("nan")}, "invalid_input", "set_price"),
            ({"successful_rnd_tests": -1}, "invalid_input", "successful_rnd_tests"),
            ({"current_customer_count": -3}, "invalid_input", "current_customer_count"),
            ({"analytics_quantity": -1}, "invalid_input", "analytics_quantity"),
            ({"avg_purchase_probability": 1.5}, "invalid_input", "avg_purchase_probability"),
            ({"profit_bonus_multiplier": 0}, "invalid_input", "profit_bonus_multiplier"),
            ({"set_price": 1e308}, "invalid_input", "set_price"),
            ({"set_price": 1e305}, "invalid_input", "set_price"),
            ({"profit_bonus_multiplier": 1e306}, "invalid_input", "profit_bonus_multiplier"),
            ({"analytics_quantity": 10**400}, "invalid_input", "analytics_quantity"),
        ],
    )
    def test_rejected(
        self,
        config: GameConfiguration,
        decision: WeeklyDecisionInput,
        scripted,
        changes: dict,
        code: str,
        field: str,
    ) -> None:
        with pytest.raises(InvalidConfiguration) as exc_info:
            compute_weekly_result(replace(decision, **changes), config, scripted())

        assert exc_info.value.code == code
        assert exc_info.value.field == field

    def test_no_draw_before_rejection(
        self, config: GameConfiguration, decision: WeeklyDecisionInput, scripted
    ) -> None:
        """An invalid stage is caught before the R&D trial consumes randomness."""
        rng = scripted(0.1)
        bad = replace(decision, rnd_tier="basic", current_funding_stage="Unknown")

        with pytest.raises(InvalidConfiguration):
            compute_weekly_result(bad, config, rng)
        assert rng.calls == 0

    def test_valid_decision_passes(self, config: GameConfiguration, decision) -> None:
        validate_decision(decision, config)

    def test_error_is_value_error(self, config: GameConfiguration, decision, scripted) -> None:
        with pytest.raises(ValueError):
            compute_weekly_result(replace(decision, product_id=0), config, scripted())


class TestResultShape:
    def test_result_is_immutable(self, config: GameConfiguration, decision, scripted) -> None:
        result = compute_weekly_result(decision, config, scripted())
        with pytest.raises(FrozenInstanceError):
            result.profit = 0  # type: ignore[misc]

    def test_to_dict_has_contract_fields(
        self, config: GameConfiguration, decision, scripted
    ) -> None:
        data = compute_weekly_result(decision, config, scripted()).to_dict()

        for key in (
            "demand",
            "revenue",
            "cogs_cost",
            "operating_cost",
            "rnd_cost",
            "analytics_cost",
            "total_costs",
            "profit",
            "rnd_tested",
            "rnd_success",
            "pass_fail_status",
            "bonus",
        ):
            assert key in data

    def test_audit_record_pairs_input_and_output(
        self, config: GameConfiguration, decision, scripted
    ) -> None:
        result = compute_weekly_result(decision, config, scripted())
        record = build_audit_record(decision, result)

        assert record["action"] == "weekly_decisions"
        assert record["details"]["product_id"] == 1
        assert record["result"]["profit"] == result.profit

    def test_run_entry_point(self, config: GameConfiguration, decision, scripted) -> None:
        assert run(decision, config=config, rng=scripted()) == compute_weekly_result(
            decision, config, scripted()
        )

    def test_default_random_source(self, config: GameConfiguration, decision) -> None:
        """Without an injected source the system source is used."""
        result = compute_weekly_result(replace(decision, rnd_tier="premium"), config)
        assert result.rnd_tested is True
        assert result.rnd_multiplier in (1.25, 0.8)


class TestLargeValues:
    """Accepted decisions always compute; oversized ones are rejected up front."""

    def test_large_finite_price_computes(
        self, config: GameConfiguration, decision, scripted
    ) -> None:
        result = compute_weekly_result(replace(decision, set_price=1e300), config, scripted())

        assert result.demand == 3600
        assert result.revenue == pytest.approx(3.6e303)
        assert result.pass_fail_status == "pass"

    def test_overflowing_price_rejected_before_draw(
        self, config: GameConfiguration, decision, scripted
    ) -> None:
        rng = scripted(0.1)
        with pytest.raises(InvalidConfiguration) as exc_info:
            compute_weekly_result(
                replace(decision, set_price=1e308, rnd_tier="basic"), config, rng
            )

        assert exc_info.value.field == "set_price"
        assert rng.calls == 0
