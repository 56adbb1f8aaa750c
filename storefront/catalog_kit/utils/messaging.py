"""消息跳转链接。

客户咨询不走下单流程，而是跳转到外部聊天服务并预填消息。
"""

from __future__ import annotations

import re
from urllib.parse import quote

DEFAULT_MESSAGING_URL = "https://wa.me"

# 与 encodeURIComponent 保持一致的不转义字符
_URI_COMPONENT_SAFE = "-_.!~*'()"
_NON_DIGIT_RE = re.compile(r"\D", re.ASCII)


def encode_uri_component(text: str) -> str:
    """按 encodeURIComponent 规则编码文本（UTF-8）。"""
    return quote(text, safe=_URI_COMPONENT_SAFE)


def normalize_phone(phone: str) -> str:
    """去掉电话号码中的所有非数字字符。"""
    return _NON_DIGIT_RE.sub("", phone)


def generate_whatsapp_url(
    phone: str,
    message: str,
    base_url: str = DEFAULT_MESSAGING_URL,
) -> str:
    """生成预填消息的聊天跳转链接。
    
    使用示例:
        generate_whatsapp_url("+91 98765-43210", "Hi there")
        # "https://wa.me/919876543210?text=Hi%20there"
    
    Args:
        phone: 电话号码（任意格式）
        message: 预填消息
        base_url: 聊天服务地址
        
    Returns:
        str: 跳转链接
    """
    return f"{base_url.rstrip('/')}/{normalize_phone(phone)}?text={encode_uri_component(message)}"


def product_inquiry_message(product_name: str) -> str:
    """生成商品咨询的默认消息（商品未配置自定义消息时使用）。"""
    return f"Hi! I'm interested in {product_name}. Could you tell me more about it?"


__all__ = [
    "DEFAULT_MESSAGING_URL",
    "encode_uri_component",
    "generate_whatsapp_url",
    "normalize_phone",
    "product_inquiry_message",
]
