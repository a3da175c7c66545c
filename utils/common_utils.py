import re
from decimal import Decimal, InvalidOperation
from typing import Iterable, Sequence

"""字符串中获取价格、数量；排序与金额校验的纯函数"""

MONEY_PATTERN = re.compile(r"\$([\d.]+)")
TOTAL_TOLERANCE = Decimal("0.01")


class ParseError(ValueError):
    """页面文本无法解析为金额或数量"""


def _to_decimal(raw: str, text: str) -> Decimal:
    try:
        value = Decimal(raw)
    except InvalidOperation as exc:
        raise ParseError(f"无法从文本中解析金额：{text!r}") from exc
    if not value.is_finite():
        raise ParseError(f"无法从文本中解析金额：{text!r}")
    return value


def parse_price(text: str) -> Decimal:
    """
        '$29.99' -> Decimal('29.99')，只去掉开头的 $，不处理千分位/本地化
        """
    raw = text.strip()
    if not raw.startswith("$"):
        raise ParseError(f"价格缺少 $ 前缀：{text!r}")
    return _to_decimal(raw[1:], text)


def parse_money(text: str) -> Decimal:
    """
        从 'Item total: $39.98' 提取 Decimal('39.98')
        """
    match = MONEY_PATTERN.search(text)
    if not match:
        raise ParseError(f"无法从文本中解析金额：{text!r}")
    return _to_decimal(match.group(1), text)


def parse_quantity(text: str) -> int:
    raw = text.strip()
    # 只接受 int() 能解析的十进制数字，"²" 这类上标不算
    if not raw.isdecimal():
        raise ParseError(f"无法从文本中解析数量：{text!r}")
    return int(raw)


def sum_money(values: Iterable[Decimal]) -> Decimal:
    # 显式指定 sum 初始值="0"
    return sum(values, Decimal("0"))


def is_sorted_asc(values: Sequence) -> bool:
    return list(values) == sorted(values)


def is_sorted_desc(values: Sequence) -> bool:
    return list(values) == sorted(values, reverse=True)


def totals_match(subtotal: Decimal, tax: Decimal, total: Decimal,
                 tolerance: Decimal = TOTAL_TOLERANCE) -> bool:
    """subtotal + tax 与页面显示的 total 误差小于 tolerance"""
    return abs(subtotal + tax - total) < tolerance
