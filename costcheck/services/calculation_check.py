"""
Cost calculation check.

Walks the fixed sample records through coercion, ratio and formatting steps
and returns the report as text lines, contrasting the coerced numeric sum
with naive string concatenation of the same fields.
"""

from typing import List

from costcheck.core.logger import get_logger
from costcheck.models import (
    EXPECTED_SAMPLE_TOTAL_COST,
    SAMPLE_NUMERIC_RECORD,
    SAMPLE_STRING_RECORD,
    NumericCostRecord,
    StringCostRecord,
)
from costcheck.services.cost_service import CostService
from costcheck.utils.formatters import (
    concat_text,
    format_currency,
    format_rate,
    naive_sum,
    type_tag,
)

logger = get_logger(__name__)

FIELD_LABELS = {
    'monthly_revenue': '月营收',
    'food_cost': '食材成本',
    'labor_cost': '人力成本',
    'rent_cost': '租金成本',
    'marketing_cost': '营销费用',
    'utility_cost': '水电气成本',
}


def build_report_lines(
    numeric_record: NumericCostRecord = SAMPLE_NUMERIC_RECORD,
    string_record: StringCostRecord = SAMPLE_STRING_RECORD,
    expected_total=EXPECTED_SAMPLE_TOTAL_COST,
) -> List[str]:
    service = CostService()
    lines = ['=== 测试数值计算 ===']

    lines.append('原始数据:')
    for name, label in FIELD_LABELS.items():
        lines.append(f'{label}: {getattr(numeric_record, name)}')

    total_cost = service.total_cost(numeric_record)
    monthly_revenue = service.monthly_revenue(numeric_record)
    ratios = service.calculate_ratios(numeric_record)

    lines.append('')
    lines.append('计算结果:')
    lines.append(f'总成本: {total_cost}')
    lines.append(f'总成本率: {format_rate(ratios.total_cost_rate)}')
    lines.append(f'净利润率: {format_rate(ratios.net_profit_rate)}')

    lines.append('')
    lines.append('格式化结果:')
    lines.append(f'总成本格式化: {format_currency(total_cost)}')
    lines.append(f'月营收格式化: {format_currency(monthly_revenue)}')

    lines.append('')
    lines.append('数据类型检查:')
    for name in numeric_record.COST_FIELDS:
        lines.append(f'{name}类型: {type_tag(getattr(numeric_record, name))}')

    lines.append('')
    lines.append('字符串拼接测试:')
    wrong_way = concat_text(numeric_record.cost_values())
    lines.append(f'❌ 错误方式(字符串拼接): {wrong_way}')
    lines.append(f'✅ 正确方式(数字相加): {total_cost}')

    lines.append('')
    lines.append('=== 字符串输入场景测试 ===')
    string_total_cost = service.total_cost(string_record)
    lines.append(f'字符串数据总成本: {string_total_cost}')
    lines.append(f'结果是否正确: {string_total_cost == expected_total}')

    wrong_string_total = naive_sum(string_record.cost_values())
    lines.append(f'❌ 不转换直接相加: {wrong_string_total}')
    lines.append(f'❌ 错误结果类型: {type_tag(wrong_string_total)}')

    logger.info(
        f"Calculation check done: numeric total={total_cost}, "
        f"string total={string_total_cost}, expected={expected_total}"
    )
    return lines
