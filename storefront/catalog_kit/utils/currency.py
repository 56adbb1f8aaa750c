"""价格编解码。

价格字符串格式为 "₹12,34,567"（印度数字分组）。

- parse_price_to_number: 宽松解析，无法识别时返回 0
- format_number_to_price: 对所有有限数值都能输出，非数值返回 "₹0"
"""

from __future__ import annotations

import re
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Any

from .coercion import is_finite_number

CURRENCY_SYMBOL = "₹"
ZERO_PRICE = f"{CURRENCY_SYMBOL}0"
MAX_FRACTION_DIGITS = 3

_PRICE_RE = re.compile(rf"{CURRENCY_SYMBOL}([0-9,]+)")


def parse_price_to_number(price: Any) -> int:
    """把价格字符串解析为整数金额。
    
    匹配货币符号后的数字（可带千分位逗号），忽略其余文本。
    不支持小数和负数。
    
    使用示例:
        parse_price_to_number("₹12,000")  # 12000
        parse_price_to_number(12000)      # 0
    
    Args:
        price: 价格字符串
        
    Returns:
        int: 金额，无法解析时为 0
    """
    if not isinstance(price, str):
        return 0
    
    match = _PRICE_RE.search(price)
    if not match:
        return 0
    
    digits = match.group(1).replace(",", "")
    return int(digits) if digits else 0


def _group_digits(digits: str) -> str:
    """按 en-IN 规则分组：末三位一组，其余两位一组。"""
    if len(digits) <= 3:
        return digits
    
    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return ",".join(groups + [tail])


def format_number_to_price(number: Any) -> str:
    """把数值格式化为价格字符串。
    
    小数最多保留三位并去掉末尾的 0。
    
    使用示例:
        format_number_to_price(1234567)  # "₹12,34,567"
        format_number_to_price("12")     # "₹0"
    
    Args:
        number: 金额
        
    Returns:
        str: 价格字符串
    """
    if not is_finite_number(number):
        return ZERO_PRICE
    
    # 按浮点数的精确二进制值舍入
    value = Decimal(number)
    with localcontext() as ctx:
        ctx.prec = max(28, value.adjusted() + MAX_FRACTION_DIGITS + 2)
        amount = value.quantize(Decimal(1).scaleb(-MAX_FRACTION_DIGITS), rounding=ROUND_HALF_UP)
    if amount == 0:
        return ZERO_PRICE
    
    sign = "-" if amount < 0 else ""
    whole, _, fraction = f"{amount.copy_abs():f}".partition(".")
    fraction = fraction.rstrip("0")
    
    rendered = _group_digits(whole)
    if fraction:
        rendered = f"{rendered}.{fraction}"
    return f"{CURRENCY_SYMBOL}{sign}{rendered}"


__all__ = [
    "CURRENCY_SYMBOL",
    "ZERO_PRICE",
    "format_number_to_price",
    "parse_price_to_number",
]
