from pydantic import BaseModel
from typing import Literal


class CostRatios(BaseModel):
    """비용 비율 (rate는 퍼센트, ratio는 매출 대비 비율)"""
    total_cost: float
    monthly_revenue: float
    total_cost_rate: float
    net_profit_rate: float
    food_cost_ratio: float
    labor_cost_ratio: float
    rent_cost_ratio: float
    marketing_cost_ratio: float
    utility_cost_ratio: float


class BreakEvenAnalysis(BaseModel):
    """손익분기점 분석"""
    fixed_costs: float
    variable_costs: float
    variable_cost_rate: float
    contribution_margin_rate: float
    break_even_revenue: float
    safety_margin: float
    operating_cash_flow: float
    cash_flow_coverage_ratio: float


class CostAlert(BaseModel):
    """비용 경고"""
    level: Literal['info', 'warning', 'danger']
    title: str
    detail: str
