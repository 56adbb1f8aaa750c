"""接口层。"""

from .egress import ResponseBuilder

__all__ = [
    "ResponseBuilder",
]
