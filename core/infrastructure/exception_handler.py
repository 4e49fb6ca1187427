"""
统一异常处理器。
提供全局异常处理机制，将各种异常转换为统一的API响应格式。
"""
import logging
import traceback
from django.http import Http404
from rest_framework.exceptions import (
    APIException,
    NotFound,
    ValidationError as DRFValidationError
)
from rest_framework import status

from core.domain.exceptions import (
    DomainException,
    EntityAlreadyExistsException,
    EntityNotFoundException,
    StorageException,
    ValidationException,
)
from core.infrastructure.response import ApiResponseBuilder, StatusCode

logger = logging.getLogger(__name__)


def unified_exception_handler(exc, context):
    """
    统一异常处理器，将各种异常转换为统一的API响应格式。

    Args:
        exc: 异常对象
        context: 异常上下文

    Returns:
        Response: 统一格式的API响应
    """
    request = context.get('request')

    # 1. 处理领域异常
    if isinstance(exc, ValidationException):
        return ApiResponseBuilder.fail(
            message=str(exc),
            code=StatusCode.VALIDATION_ERROR,
            data={"field": exc.field_name, "error": exc.code},
            http_code=status.HTTP_400_BAD_REQUEST
        )

    elif isinstance(exc, EntityAlreadyExistsException):
        return ApiResponseBuilder.fail(
            message=str(exc),
            code=StatusCode.DUPLICATE_ENTITY,
            http_code=status.HTTP_409_CONFLICT
        )

    elif isinstance(exc, EntityNotFoundException):
        return ApiResponseBuilder.fail(
            message=str(exc),
            code=StatusCode.PRODUCT_NOT_FOUND,
            http_code=status.HTTP_404_NOT_FOUND
        )

    elif isinstance(exc, StorageException):
        logger.error(f"存储异常: {exc}")
        return ApiResponseBuilder.fail(
            message="数据库暂时不可用",
            code=StatusCode.DATABASE_ERROR,
            http_code=status.HTTP_503_SERVICE_UNAVAILABLE
        )

    elif isinstance(exc, DomainException):
        return ApiResponseBuilder.fail(
            message=str(exc),
            code=StatusCode.BAD_REQUEST,
            http_code=status.HTTP_400_BAD_REQUEST
        )

    # 2. 处理Django和DRF异常
    elif isinstance(exc, (Http404, NotFound)):
        return ApiResponseBuilder.fail(
            message="请求的资源不存在",
            code=StatusCode.NOT_FOUND,
            http_code=status.HTTP_404_NOT_FOUND
        )

    elif isinstance(exc, DRFValidationError):
        return ApiResponseBuilder.fail(
            message="数据验证失败",
            code=StatusCode.VALIDATION_ERROR,
            data=exc.detail,
            http_code=status.HTTP_400_BAD_REQUEST
        )

    elif isinstance(exc, APIException):
        return ApiResponseBuilder.fail(
            message=str(exc),
            code=StatusCode.BAD_REQUEST,
            http_code=exc.status_code
        )

    # 3. 处理其他未预期的异常
    method = request.method if request else "-"
    path = request.path if request else "-"
    logger.error(
        f"处理请求时发生未处理的异常: {method} {path}\n"
        f"异常类型: {exc.__class__.__name__}\n"
        f"异常信息: {str(exc)}\n"
        f"异常追踪: {traceback.format_exc()}"
    )
    return ApiResponseBuilder.fail(
        message="服务器内部错误",
        code=StatusCode.SERVER_ERROR,
        http_code=status.HTTP_500_INTERNAL_SERVER_ERROR
    )
