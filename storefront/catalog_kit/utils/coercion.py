"""宽松数值转换。

"转换或默认"策略：非法输入不抛异常，而是回退到默认值。
分页计算和价格编解码都依赖这里的规则。
"""

from __future__ import annotations

import math
import re
from typing import Any

_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")


def parse_int(value: Any) -> int | None:
    """按 JavaScript parseInt 的规则解析整数。
    
    - int 原样返回（bool 不算数字）
    - 有限 float 向零截断
    - 字符串取开头的整数部分（允许前导空白和正负号），如 "3abc" -> 3
    - 其余情况返回 None
    
    Args:
        value: 任意输入
        
    Returns:
        int | None: 解析结果，无法解析时为 None
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        return math.trunc(value)
    if isinstance(value, str):
        match = _LEADING_INT_RE.match(value)
        if match:
            return int(match.group(1))
    return None


def coerce_int(value: Any, default: int) -> int:
    """解析整数，失败或结果为 0 时返回默认值。
    
    与 `parseInt(x) || default` 等价：0 也视为无效输入。
    
    Args:
        value: 任意输入
        default: 默认值
        
    Returns:
        int: 解析结果或默认值
    """
    parsed = parse_int(value)
    return parsed if parsed else default


def clamp(value: int, lower: int, upper: int | None = None) -> int:
    """把整数限制在 [lower, upper] 区间内。"""
    if upper is not None:
        value = min(upper, value)
    return max(lower, value)


def is_finite_number(value: Any) -> bool:
    """是否为有限数值（bool 除外）。"""
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and math.isfinite(value)


__all__ = [
    "clamp",
    "coerce_int",
    "is_finite_number",
    "parse_int",
]
