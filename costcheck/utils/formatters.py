import math
import re
import operator
from decimal import ROUND_HALF_UP, Context, Decimal
from functools import reduce
from typing import Dict, Iterable, Tuple

from ..core.config import settings
from ..core.exceptions import UnsupportedLocaleException


# 로케일별 (천 단위 구분자, 소수점)
NUMBER_LOCALES: Dict[str, Tuple[str, str]] = {
    'zh-CN': (',', '.'),
    'en-US': (',', '.'),
    'de-DE': ('.', ','),
    'fr-FR': ('\u202f', ','),
}

MAX_FRACTION_DIGITS = 3

# float 최대값(309자리)도 소수 자릿수까지 담을 수 있는 정밀도
RATE_CONTEXT = Context(prec=400)

# 폼 입력 숫자 문자열 문법 (브라우저 Number()와 동일)
JS_WHITESPACE = (
    ' \t\n\v\f\r\u00a0\u1680\u2028\u2029\u202f\u205f\u3000\ufeff'
    + ''.join(chr(c) for c in range(0x2000, 0x200b))
)
INFINITY_PATTERN = re.compile(r'^([+-]?)Infinity$')
RADIX_PATTERNS = (
    (re.compile(r'^0[xX]([0-9a-fA-F]+)$'), 16),
    (re.compile(r'^0[oO]([0-7]+)$'), 8),
    (re.compile(r'^0[bB]([01]+)$'), 2),
)
DECIMAL_PATTERN = re.compile(r'^[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?$')
INTEGER_PATTERN = re.compile(r'^[+-]?[0-9]+$')


def to_number(value):
    """안전한 숫자 변환

    None, 빈 문자열, 숫자로 읽을 수 없는 값은 모두 0이 된다. 예외를 던지지 않는다.
    정수 형태의 문자열("60000", "0x10")은 int, 그 외("12.5", "1e3")는 float으로 변환한다.
    "inf", "1_000", "60,000" 처럼 브라우저 Number()가 거부하는 문자열도 0이 된다.
    """
    if value is None:
        return 0
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return 0 if math.isnan(value) else value
    if isinstance(value, Decimal):
        return 0 if value.is_nan() else value
    if not isinstance(value, str):
        return 0

    text = value.strip(JS_WHITESPACE)
    if not text:
        return 0

    match = INFINITY_PATTERN.match(text)
    if match:
        return -math.inf if match.group(1) == '-' else math.inf

    for pattern, base in RADIX_PATTERNS:
        match = pattern.match(text)
        if match:
            return int(match.group(1), base)

    if not DECIMAL_PATTERN.match(text):
        return 0
    if INTEGER_PATTERN.match(text):
        try:
            return int(text)
        except ValueError:
            # 자릿수 제한을 넘는 정수 문자열
            pass
    return float(text)


def format_number(value, locale: str = None) -> str:
    """숫자 포맷팅 (로케일별 천 단위 구분자 추가)"""
    locale = locale or settings.number_locale
    try:
        group_sep, decimal_sep = NUMBER_LOCALES[locale]
    except KeyError:
        raise UnsupportedLocaleException(f"Unsupported number locale: {locale}")

    number = to_number(value)
    if number == 0:
        return '0'
    if isinstance(number, (float, Decimal)) and not math.isfinite(number):
        return '∞' if number > 0 else '-∞'

    if isinstance(number, int):
        text = f'{number:,}'
    else:
        text = f'{number:,.{MAX_FRACTION_DIGITS}f}'.rstrip('0').rstrip('.')

    return text.replace(',', '\0').replace('.', decimal_sep).replace('\0', group_sep)


def format_currency(value, symbol: str = None, locale: str = None) -> str:
    """통화 기호를 붙인 숫자 포맷팅"""
    if symbol is None:
        symbol = settings.currency_symbol
    return symbol + format_number(value, locale)


def _quantize_rate(value, decimals):
    # toFixed와 같이 이진 값 그대로 반올림, 정확한 .5는 0에서 먼 쪽으로
    number = to_number(value)
    quantized = Decimal(number).quantize(
        Decimal(1).scaleb(-decimals), rounding=ROUND_HALF_UP, context=RATE_CONTEXT
    )
    if not number < 0:
        quantized = quantized.copy_abs()
    return quantized


def round_rate(value, decimals: int = None) -> float:
    """퍼센트 값을 표시 자릿수로 반올림 (예: 12.25 -> 12.3)"""
    if decimals is None:
        decimals = settings.rate_decimals
    number = to_number(value)
    if isinstance(number, (float, Decimal)) and not math.isfinite(number):
        return float(number)
    return float(_quantize_rate(number, decimals))


def format_rate(value, decimals: int = None) -> str:
    """퍼센트 값 포맷팅 (예: 105.333 -> '105.3%')"""
    if decimals is None:
        decimals = settings.rate_decimals
    number = to_number(value)
    if isinstance(number, (float, Decimal)) and not math.isfinite(number):
        return ('Infinity' if number > 0 else '-Infinity') + '%'
    return f'{_quantize_rate(number, decimals):f}%'


def type_tag(value) -> str:
    """값의 런타임 타입 이름"""
    return type(value).__name__


def concat_text(values: Iterable) -> str:
    """값들을 숫자 변환 없이 문자열로 이어 붙인다"""
    return ''.join(str(v) for v in values)


def naive_sum(values: Iterable):
    """변환 없이 + 연산으로 합산 (문자열이면 이어 붙이기가 된다)"""
    return reduce(operator.add, values)
