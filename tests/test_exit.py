"""
Tests for sale proceeds and total return.
"""

import pytest

from rentalroi.calculations.exit import (
    calculate_exit,
    calculate_sale_proceeds,
    calculate_total_return,
)
from rentalroi.calculations.irr import calculate_irr
from rentalroi.calculations.projections import (
    build_cash_flow_series,
    calculate_multi_year_projection,
)


class TestSaleProceeds:
    """Test sale proceeds calculations."""

    def test_standard_sale(self):
        """$600k sale, 6% costs, $300k payoff."""
        sale = calculate_sale_proceeds(600000, 6, 300000)
        assert sale.sale_price == 600000
        assert sale.selling_costs == 36000
        assert sale.loan_payoff == 300000
        assert sale.net_proceeds == 264000

    def test_no_loan(self):
        """Test a sale without a loan payoff."""
        sale = calculate_sale_proceeds(500000, 6, 0)
        assert sale.net_proceeds == 470000

    def test_no_selling_costs(self):
        """Test a sale without selling costs."""
        sale = calculate_sale_proceeds(500000, 0, 200000)
        assert sale.selling_costs == 0
        assert sale.net_proceeds == 300000

    def test_underwater_sale(self):
        """Payoff above the net sale price gives negative proceeds."""
        sale = calculate_sale_proceeds(400000, 6, 390000)
        assert sale.net_proceeds == -14000

    def test_rounded_to_cents(self):
        """Test sale figures are rounded to cents."""
        sale = calculate_sale_proceeds(333333.333, 6.5, 123456.789)
        for value in sale.to_dict().values():
            assert value == round(value, 2)


class TestTotalReturn:
    """Test total return calculation."""

    @pytest.fixture
    def cash_flows(self):
        """IRR series for a 5-year hold."""
        return [-100000, 8000, 8000, 8000, 8000, 158000]

    def test_total_return(self, cash_flows):
        """Test total return, equity multiple and IRR."""
        result = calculate_total_return(40000, 150000, 100000, cash_flows)

        assert result.total_cash_flow == 40000
        assert result.sale_proceeds == 150000
        assert result.total_return == 190000
        assert result.total_investment == 100000
        assert result.equity_multiple == 1.9
        assert 15 < result.irr < 16

    def test_irr_matches_solver(self, cash_flows):
        """Test the reported IRR is the solver's."""
        result = calculate_total_return(40000, 150000, 100000, cash_flows)
        assert result.irr == calculate_irr(cash_flows)

    def test_losing_investment(self):
        """Test a hold that loses money."""
        result = calculate_total_return(-10000, 60000, 100000, [-100000, -5000, 55000])
        assert result.total_return == 50000
        assert result.equity_multiple == 0.5
        assert result.irr < 0

    def test_uncomputable_irr_reported_as_zero(self):
        """Test a missing IRR is reported as 0."""
        result = calculate_total_return(0, 0, 100000, [-100000, 0, 0])
        assert result.irr == 0
        assert result.equity_multiple == 0


class TestExit:
    """Test the exit analysis of a full projection."""

    @pytest.fixture
    def projections(self, scenario_inputs):
        """Project the base scenario."""
        return calculate_multi_year_projection(scenario_inputs)

    def test_sells_at_final_year_value(self, scenario_inputs, projections):
        """Test the sale uses the final year's value and balance."""
        sale, _ = calculate_exit(scenario_inputs, projections)
        final_year = projections[-1]

        assert sale.sale_price == final_year.property_value
        assert sale.loan_payoff == final_year.loan_balance
        assert sale.selling_costs == round(final_year.property_value * 0.06, 2)

    def test_total_return_combines_cash_flow_and_sale(self, scenario_inputs, projections):
        """Test total return is cumulative cash flow plus sale."""
        sale, total = calculate_exit(scenario_inputs, projections)

        assert total.total_cash_flow == projections[-1].cumulative_cash_flow
        assert total.sale_proceeds == sale.net_proceeds
        assert total.total_investment == 115000
        assert total.total_return == round(
            projections[-1].cumulative_cash_flow + sale.net_proceeds, 2
        )

    def test_irr_from_folded_series(self, scenario_inputs, projections):
        """Test IRR is computed on the folded series."""
        sale, total = calculate_exit(scenario_inputs, projections)
        series = build_cash_flow_series(115000, projections, sale.net_proceeds)
        assert total.irr == calculate_irr(series)
        assert total.irr > 0

    def test_equity_multiple(self, scenario_inputs, projections):
        """Test equity multiple over the fixed investment."""
        _, total = calculate_exit(scenario_inputs, projections)
        assert total.equity_multiple == round(total.total_return / 115000, 2)
        assert total.equity_multiple > 1

    def test_payoff_is_zero_after_loan_term(self, make_inputs):
        """Test no payoff once the loan is retired."""
        inputs = make_inputs(loan_term_years=5, holding_length=7)
        projections = calculate_multi_year_projection(inputs)
        sale, _ = calculate_exit(inputs, projections)
        assert sale.loan_payoff == 0

    def test_no_projection_years(self, scenario_inputs):
        """Test an empty projection sells nothing and returns nothing."""
        sale, total = calculate_exit(scenario_inputs, [])

        assert sale.sale_price == 0
        assert sale.selling_costs == 0
        assert sale.loan_payoff == 0
        assert sale.net_proceeds == 0
        assert total.total_cash_flow == 0
        assert total.total_return == 0
        assert total.total_investment == 115000
        assert total.equity_multiple == 0
        assert total.irr == 0
