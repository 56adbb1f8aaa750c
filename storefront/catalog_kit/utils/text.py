"""文本与标识工具。

提供：
- slug 生成
- 用户输入过滤（去除 script 块和 HTML 标签）
- 随机字符串生成
- 常用格式校验
"""

from __future__ import annotations

import random
import re
import string
from collections.abc import Sized
from typing import Any
from urllib.parse import urlsplit

_WHITESPACE_RE = re.compile(r"\s+")
_NON_SLUG_RE = re.compile(r"[^a-z0-9-]+")
_MULTI_HYPHEN_RE = re.compile(r"-{2,}")
_SCRIPT_RE = re.compile(r"<script\b[^<]*(?:(?!</script>)<[^<]*)*</script>", re.IGNORECASE)
_TAG_RE = re.compile(r"<[^>]*>")
_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
_IMAGE_EXT_RE = re.compile(r"\.(jpg|jpeg|png|webp|gif)$", re.IGNORECASE)

RANDOM_ALPHABET = string.ascii_uppercase + string.ascii_lowercase + string.digits
FILE_SIZE_UNITS = ("Bytes", "KB", "MB", "GB")


def generate_slug(text: Any) -> str:
    """从任意文本生成 slug。
    
    小写、去首尾空白、空白替换为连字符、移除 [a-z0-9-] 以外的字符、
    合并连续连字符、去掉首尾连字符。非 ASCII 文字会被整体移除。
    
    使用示例:
        generate_slug("  Men's Shoes!! ")  # "mens-shoes"
    
    Args:
        text: 输入文本（非字符串会先转为字符串）
        
    Returns:
        str: slug，可能为空字符串
    """
    slug = str(text).lower().strip()
    slug = _WHITESPACE_RE.sub("-", slug)
    slug = _NON_SLUG_RE.sub("", slug)
    slug = _MULTI_HYPHEN_RE.sub("-", slug)
    return slug.strip("-")


def sanitize_input(value: Any) -> Any:
    """过滤用户输入。
    
    非字符串原样返回。字符串先去首尾空白，再移除 <script>...</script> 块，
    最后移除剩余的尖括号标签。
    
    注意：这只是文本过滤，不会解码 HTML 实体，也不处理属性中的注入。
    
    Args:
        value: 用户输入
        
    Returns:
        Any: 过滤后的字符串，或原样返回的非字符串输入
    """
    if not isinstance(value, str):
        return value
    
    cleaned = _SCRIPT_RE.sub("", value.strip())
    return _TAG_RE.sub("", cleaned)


def generate_random_string(length: int = 8) -> str:
    """生成字母数字随机字符串。
    
    使用非加密随机源，不可用于安全 token。
    
    Args:
        length: 长度（默认8）
        
    Returns:
        str: 随机字符串
    """
    return "".join(random.choice(RANDOM_ALPHABET) for _ in range(length))


def is_valid_email(email: str) -> bool:
    """校验邮箱格式。"""
    return isinstance(email, str) and bool(_EMAIL_RE.match(email))


def is_valid_url(url: str) -> bool:
    """校验是否为带协议和主机的绝对 URL。"""
    if not isinstance(url, str):
        return False
    try:
        parts = urlsplit(url)
    except ValueError:
        return False
    return bool(parts.scheme and parts.netloc)


def is_valid_image_url(url: str) -> bool:
    """校验图片 URL（jpg/jpeg/png/webp/gif）。"""
    if not is_valid_url(url):
        return False
    return bool(_IMAGE_EXT_RE.search(url))


def is_empty(value: Any) -> bool:
    """判断值是否为空。
    
    None、空字符串、空列表、空字典为空；其他非容器值不为空。
    """
    if value is None:
        return True
    if isinstance(value, Sized):
        return len(value) == 0
    return False


def get_file_extension(filename: str) -> str:
    """获取文件扩展名（不含点）。
    
    没有点或只有前导点（如 ".env"）时返回空字符串。
    """
    index = filename.rfind(".")
    if index <= 0:
        return ""
    return filename[index + 1:]


def format_file_size(size: int) -> str:
    """格式化文件大小。
    
    使用示例:
        format_file_size(1536)  # "1.5 KB"
    """
    if size <= 0:
        return "0 Bytes"
    
    value = float(size)
    index = 0
    while value >= 1024 and index < len(FILE_SIZE_UNITS) - 1:
        value /= 1024
        index += 1
    rendered = f"{value:.2f}".rstrip("0").rstrip(".")
    return f"{rendered} {FILE_SIZE_UNITS[index]}"


__all__ = [
    "generate_random_string",
    "generate_slug",
    "sanitize_input",
    "is_valid_email",
    "is_valid_url",
    "is_valid_image_url",
    "is_empty",
    "get_file_extension",
    "format_file_size",
]
