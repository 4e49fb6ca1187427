"""
API视图基类。
提供统一的API视图类，用于规范API响应格式。
错误响应由统一异常处理器生成，视图只负责成功路径。
"""
from rest_framework.views import APIView

from core.infrastructure.response import ApiResponseBuilder, StatusCode


class ApiBaseView(APIView):
    """API视图基类，提供统一的响应方法"""

    def success_response(self, data=None, message="操作成功", code=StatusCode.SUCCESS):
        """
        成功响应

        Args:
            data: 响应数据
            message: 响应消息
            code: 业务状态码

        Returns:
            Response: 统一格式的响应
        """
        return ApiResponseBuilder.success(data=data, message=message, code=code)

    def created_response(self, data=None, message="创建成功", code=StatusCode.CREATED):
        """
        创建成功响应

        Args:
            data: 响应数据
            message: 响应消息
            code: 业务状态码

        Returns:
            Response: 统一格式的响应
        """
        return ApiResponseBuilder.created(data=data, message=message, code=code)
