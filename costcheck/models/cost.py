from pydantic import BaseModel, Field
from typing import ClassVar, Tuple, Union

Number = Union[int, float]


class CostRecordBase(BaseModel):
    """비용 레코드 공통 (월 매출 + 5개 비용 항목)"""

    COST_FIELDS: ClassVar[Tuple[str, ...]] = (
        'food_cost',
        'labor_cost',
        'rent_cost',
        'marketing_cost',
        'utility_cost',
    )

    def cost_values(self) -> tuple:
        """비용 항목 값 (식자재, 인건비, 임대료, 마케팅, 수도광열 순)"""
        return tuple(getattr(self, name) for name in self.COST_FIELDS)

    class Config:
        frozen = True
        strict = True


class NumericCostRecord(CostRecordBase):
    """숫자 값 비용 레코드"""
    monthly_revenue: Number = Field(..., description="월 매출")
    food_cost: Number = Field(..., description="식자재 비용")
    labor_cost: Number = Field(..., description="인건비")
    rent_cost: Number = Field(..., description="임대료")
    marketing_cost: Number = Field(..., description="마케팅 비용")
    utility_cost: Number = Field(..., description="수도광열비")


class StringCostRecord(CostRecordBase):
    """문자열 값 비용 레코드 (HTML 폼 입력 형태)"""
    monthly_revenue: str = Field(..., description="월 매출")
    food_cost: str = Field(..., description="식자재 비용")
    labor_cost: str = Field(..., description="인건비")
    rent_cost: str = Field(..., description="임대료")
    marketing_cost: str = Field(..., description="마케팅 비용")
    utility_cost: str = Field(..., description="수도광열비")
