"""
统一响应封装模块。
提供API响应的标准化结构，包括业务状态码、成功标志、消息、数据等。
"""
import time
import uuid
import typing as t
from rest_framework.response import Response
from rest_framework import status as http_status
from dataclasses import dataclass, field


@dataclass
class ApiResponse:
    """API响应数据结构"""
    code: int = 10000  # 业务状态码
    success: bool = True  # 是否成功
    message: str = "操作成功"  # 响应消息
    data: t.Any = None  # 响应数据
    timestamp: int = field(default_factory=lambda: int(time.time() * 1000))  # 时间戳，毫秒级
    trace_id: str = field(default_factory=lambda: str(uuid.uuid4()))  # 追踪ID

    def to_dict(self) -> dict:
        """转换为字典"""
        result = {
            "code": self.code,
            "success": self.success,
            "message": self.message,
            "timestamp": self.timestamp,
            "traceId": self.trace_id,
        }

        # 只有在有数据时才添加data字段
        if self.data is not None:
            result["data"] = self.data

        return result


class ApiResponseBuilder:
    """API响应构建器"""

    @staticmethod
    def success(data: t.Any = None, message: str = "操作成功", code: int = 10000) -> Response:
        """
        创建成功响应

        Args:
            data: 响应数据
            message: 响应消息
            code: 业务状态码

        Returns:
            Response: DRF响应对象
        """
        response = ApiResponse(code=code, success=True, message=message, data=data)
        return Response(response.to_dict(), status=http_status.HTTP_200_OK)

    @staticmethod
    def created(data: t.Any = None, message: str = "创建成功", code: int = 10001) -> Response:
        """
        创建资源成功响应

        Args:
            data: 响应数据
            message: 响应消息
            code: 业务状态码

        Returns:
            Response: DRF响应对象
        """
        response = ApiResponse(code=code, success=True, message=message, data=data)
        return Response(response.to_dict(), status=http_status.HTTP_201_CREATED)

    @staticmethod
    def fail(
        message: str = "操作失败",
        code: int = 50000,
        data: t.Any = None,
        http_code: int = http_status.HTTP_400_BAD_REQUEST
    ) -> Response:
        """
        创建失败响应

        Args:
            message: 错误消息
            code: 业务状态码
            data: 错误详情数据
            http_code: HTTP状态码

        Returns:
            Response: DRF响应对象
        """
        response = ApiResponse(code=code, success=False, message=message, data=data)
        return Response(response.to_dict(), status=http_code)


# 状态码枚举
class StatusCode:
    """业务状态码定义"""

    # 成功状态码 (1xxxx)
    SUCCESS = 10000                # 通用成功
    CREATED = 10001                # 创建成功

    # 客户端错误 (4xxxx)
    BAD_REQUEST = 40000            # 错误的请求
    VALIDATION_ERROR = 40001       # 数据验证错误

    # 资源错误 (404xx)
    NOT_FOUND = 40400              # 资源不存在
    PRODUCT_NOT_FOUND = 40403      # 商品不存在

    # 操作冲突 (409xx)
    DUPLICATE_ENTITY = 40902       # 实体重复

    # 服务端错误 (5xxxx)
    SERVER_ERROR = 50000           # 服务器内部错误
    DATABASE_ERROR = 50002         # 数据库错误
