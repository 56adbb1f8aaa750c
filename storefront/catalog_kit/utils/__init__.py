"""通用工具集。

纯函数、无状态，在数据跨越信任或格式边界时调用。
"""

from .coercion import clamp, coerce_int, is_finite_number, parse_int
from .currency import CURRENCY_SYMBOL, format_number_to_price, parse_price_to_number
from .messaging import generate_whatsapp_url, normalize_phone, product_inquiry_message
from .text import (
    format_file_size,
    generate_random_string,
    generate_slug,
    get_file_extension,
    is_empty,
    is_valid_email,
    is_valid_image_url,
    is_valid_url,
    sanitize_input,
)

__all__ = [
    # 数值转换
    "clamp",
    "coerce_int",
    "is_finite_number",
    "parse_int",
    # 价格
    "CURRENCY_SYMBOL",
    "format_number_to_price",
    "parse_price_to_number",
    # 消息跳转
    "generate_whatsapp_url",
    "normalize_phone",
    "product_inquiry_message",
    # 文本
    "format_file_size",
    "generate_random_string",
    "generate_slug",
    "get_file_extension",
    "is_empty",
    "is_valid_email",
    "is_valid_image_url",
    "is_valid_url",
    "sanitize_input",
]
