from .cost import CostRecordBase, NumericCostRecord, StringCostRecord
from .analysis import CostRatios, BreakEvenAnalysis, CostAlert
from .samples import (
    SAMPLE_NUMERIC_RECORD,
    SAMPLE_STRING_RECORD,
    EXPECTED_SAMPLE_TOTAL_COST
)

__all__ = [
    'CostRecordBase',
    'NumericCostRecord',
    'StringCostRecord',
    'CostRatios',
    'BreakEvenAnalysis',
    'CostAlert',
    'SAMPLE_NUMERIC_RECORD',
    'SAMPLE_STRING_RECORD',
    'EXPECTED_SAMPLE_TOTAL_COST'
]
