from .cost import NumericCostRecord, StringCostRecord

# 고정 샘플 데이터 (월 매출 15만, 총비용 15.8만)
SAMPLE_NUMERIC_RECORD = NumericCostRecord(
    monthly_revenue=150000,
    food_cost=60000,
    labor_cost=50000,
    rent_cost=30000,
    marketing_cost=10000,
    utility_cost=8000,
)

SAMPLE_STRING_RECORD = StringCostRecord(
    monthly_revenue='150000',
    food_cost='60000',
    labor_cost='50000',
    rent_cost='30000',
    marketing_cost='10000',
    utility_cost='8000',
)

EXPECTED_SAMPLE_TOTAL_COST = 158000
