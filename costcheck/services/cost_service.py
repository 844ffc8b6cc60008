from typing import List, Mapping, Union

from pydantic import ValidationError

from costcheck.core.config import settings
from costcheck.core.exceptions import CostRecordException
from costcheck.core.logger import get_logger
from costcheck.models import (
    BreakEvenAnalysis,
    CostAlert,
    CostRatios,
    CostRecordBase,
    NumericCostRecord,
    StringCostRecord,
)
from costcheck.utils.formatters import format_rate, round_rate, to_number

logger = get_logger(__name__)

CostRecord = Union[NumericCostRecord, StringCostRecord]


def build_record(data: Mapping, numeric: bool = True) -> CostRecord:
    """Build a cost record from raw field values.

    Raises CostRecordException when a field is missing or has the wrong type.
    """
    model = NumericCostRecord if numeric else StringCostRecord
    try:
        return model(**data)
    except ValidationError as e:
        logger.error(f"{model.__name__} validation failed: {e.error_count()} error(s)")
        raise CostRecordException(f"Invalid {model.__name__}: {e}") from e


class CostService:
    """Restaurant cost calculation service"""

    # Share of each cost treated as fixed for break-even analysis
    FIXED_COST_SHARE = {
        'rent_cost': 1.0,
        'labor_cost': 0.7,
        'utility_cost': 0.8,
    }
    VARIABLE_COST_FIELDS = ('food_cost', 'marketing_cost')

    # Category rates summed, in this order, into the alert total
    ALERT_RATE_FIELDS = ('food_cost', 'labor_cost', 'rent_cost', 'utility_cost', 'marketing_cost')

    def total_cost(self, record: CostRecordBase):
        """Sum of the five cost fields, each coerced to a number"""
        return sum(to_number(v) for v in record.cost_values())

    def monthly_revenue(self, record: CostRecordBase):
        """Monthly revenue coerced to a number"""
        return to_number(record.monthly_revenue)

    def calculate_ratios(self, record: CostRecordBase) -> CostRatios:
        """Calculate cost rates (percent) and per-category cost ratios"""
        total = self.total_cost(record)
        revenue = self.monthly_revenue(record)

        def ratio(value) -> float:
            if revenue == 0:
                return 0.0
            return float(to_number(value) / revenue)

        def rate(value) -> float:
            if revenue == 0:
                return 0.0
            return float(to_number(value) / revenue * 100)

        if revenue == 0:
            logger.warning("Monthly revenue is zero, cost ratios default to 0")

        total_cost_rate = rate(total)
        ratios = CostRatios(
            total_cost=total,
            monthly_revenue=revenue,
            total_cost_rate=total_cost_rate,
            net_profit_rate=(1 - total / revenue) * 100 if revenue != 0 else 0.0,
            food_cost_ratio=ratio(record.food_cost),
            labor_cost_ratio=ratio(record.labor_cost),
            rent_cost_ratio=ratio(record.rent_cost),
            marketing_cost_ratio=ratio(record.marketing_cost),
            utility_cost_ratio=ratio(record.utility_cost),
        )
        logger.debug(
            f"total_cost={total} revenue={revenue} "
            f"total_cost_rate={ratios.total_cost_rate:.3f}"
        )
        return ratios

    def calculate_break_even(self, record: CostRecordBase) -> BreakEvenAnalysis:
        """Break-even point analysis

        fixed costs = rent + 70% labor + 80% utility
        variable costs = food + marketing
        break-even revenue = fixed costs / contribution margin rate
        """
        revenue = float(self.monthly_revenue(record))
        total = float(self.total_cost(record))

        fixed_costs = sum(
            float(to_number(getattr(record, name))) * share
            for name, share in self.FIXED_COST_SHARE.items()
        )
        variable_costs = sum(
            float(to_number(getattr(record, name))) for name in self.VARIABLE_COST_FIELDS
        )
        variable_cost_rate = variable_costs / revenue if revenue > 0 else 0.0
        contribution_margin_rate = max(0.0, 1 - variable_cost_rate)

        if contribution_margin_rate > 0:
            break_even_revenue = fixed_costs / contribution_margin_rate
        else:
            break_even_revenue = 0.0

        safety_margin = (revenue - break_even_revenue) / revenue if revenue > 0 else 0.0
        operating_cash_flow = revenue - total
        coverage = operating_cash_flow / fixed_costs if fixed_costs > 0 else 0.0

        return BreakEvenAnalysis(
            fixed_costs=fixed_costs,
            variable_costs=variable_costs,
            variable_cost_rate=variable_cost_rate,
            contribution_margin_rate=contribution_margin_rate,
            break_even_revenue=break_even_revenue,
            safety_margin=safety_margin,
            operating_cash_flow=operating_cash_flow,
            cash_flow_coverage_ratio=coverage,
        )

    def cost_alerts(self, record: CostRecordBase) -> List[CostAlert]:
        """Cost control alerts based on the configured thresholds

        Each category rate is rounded to the display precision first; the
        total rate is the sum of the rounded category rates.
        """
        revenue = self.monthly_revenue(record)
        rates = {
            name: round_rate(to_number(getattr(record, name)) / revenue * 100) if revenue else 0.0
            for name in self.ALERT_RATE_FIELDS
        }
        food_rate = rates['food_cost']
        total_cost_rate = sum(rates.values())
        alerts = []

        if food_rate > settings.food_cost_alert_rate:
            alerts.append(CostAlert(
                level='warning',
                title=f'食材成本率偏高（{format_rate(food_rate)}）',
                detail='建议优化供应链，寻找更优质的供应商',
            ))

        if total_cost_rate > settings.total_cost_alert_rate:
            alerts.append(CostAlert(
                level='danger',
                title=f'综合成本率{format_rate(total_cost_rate)}',
                detail='盈利空间严重不足，需要立即优化成本结构',
            ))

        if not alerts:
            alerts.append(CostAlert(
                level='info',
                title='成本控制良好',
                detail='各项成本指标均在合理范围内',
            ))

        logger.info(f"Cost alerts: {[a.level for a in alerts]}")
        return alerts
