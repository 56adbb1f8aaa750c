"""输入校验。

提供：
- ValidationResult：成功/失败二选一的校验结果（字段名 -> 错误消息列表）
- 商品、分类、管理员登录、分页查询的输入模型
- validate_payload：执行校验，永不抛出异常

错误消息与服务端 details 中的 message 一致。
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, ClassVar, Generic, Iterable, Mapping, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from storefront.catalog_kit.utils.text import is_valid_url, sanitize_input

T = TypeVar("T")
M = TypeVar("M", bound=BaseModel)

PRICE_FORMAT_RE = re.compile(r"^₹[\d,]+$", re.ASCII)
BOOLEAN_VALUES = (True, False, "true", "false", 0, 1, "0", "1")
SORT_FIELDS = ("name", "price", "createdAt", "updatedAt", "order")
SORT_ORDERS = ("asc", "desc")


@dataclass(frozen=True)
class ValidationResult(Generic[T]):
    """校验结果。
    
    要么是成功（携带 value），要么是失败（携带 errors），不会同时存在。
    
    使用示例:
        result = validate_payload(ProductInput, payload)
        if not result.is_valid:
            return ResponseBuilder.fail("Validation failed", details=result.to_details())
    """
    
    value: Optional[T] = None
    errors: Mapping[str, tuple[str, ...]] = field(default_factory=dict)
    
    @classmethod
    def ok(cls, value: T) -> ValidationResult[T]:
        """创建成功结果。"""
        return cls(value=value)
    
    @classmethod
    def failed(cls, errors: Mapping[str, Iterable[str]]) -> ValidationResult[T]:
        """创建失败结果。"""
        normalized = {name: tuple(messages) for name, messages in errors.items() if messages}
        if not normalized:
            raise ValueError("失败结果至少需要一条错误")
        return cls(errors=normalized)
    
    @classmethod
    def from_details(cls, details: Iterable[Mapping[str, Any]]) -> ValidationResult[T]:
        """从 [{"field", "message"}, ...] 列表创建失败结果。"""
        errors: dict[str, list[str]] = {}
        for detail in details:
            errors.setdefault(str(detail.get("field") or ""), []).append(str(detail.get("message", "")))
        return cls.failed(errors)
    
    @property
    def is_valid(self) -> bool:
        """是否校验通过。"""
        return not self.errors
    
    def messages_for(self, name: str) -> tuple[str, ...]:
        """获取某个字段的错误消息。"""
        return tuple(self.errors.get(name, ()))
    
    def to_details(self) -> list[dict[str, str]]:
        """转换为 details 列表，每条消息一项，保持字段顺序。"""
        return [
            {"field": name, "message": message}
            for name, messages in self.errors.items()
            for message in messages
        ]


def _fail(message: str) -> PydanticCustomError:
    return PydanticCustomError("invalid_input", message)


def _clean(value: Any) -> Any:
    return sanitize_input(value)


def _check_length(value: Any, minimum: int, maximum: int | None, message: str, required: str | None = None) -> str:
    if not isinstance(value, str):
        raise _fail(message)
    value = _clean(value)
    if required and not value:
        raise _fail(required)
    if len(value) < minimum or (maximum is not None and len(value) > maximum):
        raise _fail(message)
    return value


def _check_boolean(value: Any, message: str) -> bool:
    if isinstance(value, float) or value not in BOOLEAN_VALUES:
        raise _fail(message)
    return value in (True, "true", 1, "1")


class InputModel(BaseModel):
    """输入模型基类。
    
    字段以 camelCase 接收；缺失必填字段时使用 required_messages 中的消息。
    """
    
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )
    
    required_messages: ClassVar[dict[str, str]] = {}


class ProductInput(InputModel):
    """商品创建输入。"""
    
    required_messages: ClassVar[dict[str, str]] = {
        "name": "Product name is required",
        "description": "Product description is required",
        "price": "Product price is required",
        "category": "Product category is required",
        "images": "Product must have between 1 and 10 images",
    }
    
    name: str
    description: str
    price: str
    category: str
    images: list[str]
    featured: bool = False
    premium: bool = False
    whatsapp_message: Optional[str] = None
    tags: list[str] = []
    
    @field_validator("name", mode="before")
    @classmethod
    def validate_name(cls, v: Any) -> str:
        return _check_length(
            v, 2, 100,
            "Product name must be between 2 and 100 characters",
            required="Product name is required",
        )
    
    @field_validator("description", mode="before")
    @classmethod
    def validate_description(cls, v: Any) -> str:
        return _check_length(
            v, 10, 1000,
            "Description must be between 10 and 1000 characters",
            required="Product description is required",
        )
    
    @field_validator("price", mode="before")
    @classmethod
    def validate_price(cls, v: Any) -> str:
        v = _check_length(v, 0, None, "Price must be in format ₹X,XXX", required="Product price is required")
        if not PRICE_FORMAT_RE.match(v):
            raise _fail("Price must be in format ₹X,XXX")
        return v
    
    @field_validator("category", mode="before")
    @classmethod
    def validate_category(cls, v: Any) -> str:
        return _check_length(v, 1, None, "Product category is required", required="Product category is required")
    
    @field_validator("images", mode="before")
    @classmethod
    def validate_images(cls, v: Any) -> list[str]:
        if not isinstance(v, list) or not 1 <= len(v) <= 10:
            raise _fail("Product must have between 1 and 10 images")
        if not all(is_valid_url(image) for image in v):
            raise _fail("Each image must be a valid URL")
        return v
    
    @field_validator("featured", mode="before")
    @classmethod
    def validate_featured(cls, v: Any) -> bool:
        return _check_boolean(v, "Featured must be a boolean")
    
    @field_validator("premium", mode="before")
    @classmethod
    def validate_premium(cls, v: Any) -> bool:
        return _check_boolean(v, "Premium must be a boolean")
    
    @field_validator("whatsapp_message", mode="before")
    @classmethod
    def validate_whatsapp_message(cls, v: Any) -> Optional[str]:
        if v is None:
            return None
        return _check_length(v, 0, 500, "WhatsApp message cannot exceed 500 characters")
    
    @field_validator("tags", mode="before")
    @classmethod
    def validate_tags(cls, v: Any) -> list[str]:
        if v is None:
            return []
        if not isinstance(v, list):
            raise _fail("Tags must be an array")
        return [_check_length(tag, 1, 50, "Each tag must be between 1 and 50 characters") for tag in v]


class CategoryInput(InputModel):
    """分类创建输入。"""
    
    required_messages: ClassVar[dict[str, str]] = {
        "name": "Category name is required",
        "description": "Category description is required",
        "image": "Category image is required",
    }
    
    name: str
    description: str
    image: str
    order: Optional[int] = None
    
    @field_validator("name", mode="before")
    @classmethod
    def validate_name(cls, v: Any) -> str:
        return _check_length(
            v, 2, 50,
            "Category name must be between 2 and 50 characters",
            required="Category name is required",
        )
    
    @field_validator("description", mode="before")
    @classmethod
    def validate_description(cls, v: Any) -> str:
        return _check_length(
            v, 10, 200,
            "Description must be between 10 and 200 characters",
            required="Category description is required",
        )
    
    @field_validator("image", mode="before")
    @classmethod
    def validate_image(cls, v: Any) -> str:
        v = _check_length(v, 0, None, "Image must be a valid URL", required="Category image is required")
        if not is_valid_url(v):
            raise _fail("Image must be a valid URL")
        return v
    
    @field_validator("order", mode="before")
    @classmethod
    def validate_order(cls, v: Any) -> Optional[int]:
        if v is None:
            return None
        if isinstance(v, bool) or not isinstance(v, (int, str)) or not str(v).strip().isdigit():
            raise _fail("Order must be a non-negative integer")
        return int(v)


class AdminLoginInput(InputModel):
    """管理员登录输入。"""
    
    required_messages: ClassVar[dict[str, str]] = {
        "username": "Username is required",
        "password": "Password is required",
    }
    
    username: str
    password: str
    
    @field_validator("username", mode="before")
    @classmethod
    def validate_username(cls, v: Any) -> str:
        return _check_length(
            v, 3, 30,
            "Username must be between 3 and 30 characters",
            required="Username is required",
        )
    
    @field_validator("password", mode="before")
    @classmethod
    def validate_password(cls, v: Any) -> str:
        # 密码不做 trim 和过滤
        if not isinstance(v, str) or not v:
            raise _fail("Password is required")
        if len(v) < 6:
            raise _fail("Password must be at least 6 characters")
        return v


class PaginationQuery(InputModel):
    """分页查询参数。"""
    
    page: Optional[int] = None
    limit: Optional[int] = None
    sort: Optional[str] = None
    order: Optional[str] = None
    
    @field_validator("page", mode="before")
    @classmethod
    def validate_page(cls, v: Any) -> Optional[int]:
        if v is None:
            return None
        if isinstance(v, bool) or not str(v).strip().isdigit() or int(v) < 1:
            raise _fail("Page must be a positive integer")
        return int(v)
    
    @field_validator("limit", mode="before")
    @classmethod
    def validate_limit(cls, v: Any) -> Optional[int]:
        if v is None:
            return None
        if isinstance(v, bool) or not str(v).strip().isdigit() or not 1 <= int(v) <= 100:
            raise _fail("Limit must be between 1 and 100")
        return int(v)
    
    @field_validator("sort", mode="before")
    @classmethod
    def validate_sort(cls, v: Any) -> Optional[str]:
        if v is not None and v not in SORT_FIELDS:
            raise _fail("Sort field must be name, price, createdAt, updatedAt, or order")
        return v
    
    @field_validator("order", mode="before")
    @classmethod
    def validate_order(cls, v: Any) -> Optional[str]:
        if v is not None and v not in SORT_ORDERS:
            raise _fail("Order must be asc or desc")
        return v


def errors_from_exception(model: type[BaseModel], exc: PydanticValidationError) -> dict[str, list[str]]:
    """把 pydantic 校验异常转换为 字段名 -> 消息列表。"""
    required = getattr(model, "required_messages", {})
    errors: dict[str, list[str]] = {}
    for error in exc.errors():
        name = ".".join(str(part) for part in error["loc"])
        if error["type"] == "missing":
            message = required.get(name) or required.get(_snake_name(model, name)) or error["msg"]
        else:
            message = error["msg"]
        errors.setdefault(name, []).append(message)
    return errors


def _snake_name(model: type[BaseModel], alias: str) -> str:
    for name, info in model.model_fields.items():
        if info.alias == alias:
            return name
    return alias


def validate_payload(model: type[M], data: Any) -> ValidationResult[M]:
    """校验输入数据。
    
    Args:
        model: 输入模型类
        data: 原始数据（通常是请求体字典）
        
    Returns:
        ValidationResult: 校验结果
    """
    try:
        return ValidationResult.ok(model.model_validate(data))
    except PydanticValidationError as exc:
        return ValidationResult.failed(errors_from_exception(model, exc))


__all__ = [
    "AdminLoginInput",
    "CategoryInput",
    "InputModel",
    "PaginationQuery",
    "ProductInput",
    "ValidationResult",
    "errors_from_exception",
    "validate_payload",
]
