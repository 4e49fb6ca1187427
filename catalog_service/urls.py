"""
URL configuration for catalog_service project.

商品API挂载在 /api/v1/ 下，指标和健康检查挂载在根路径。
"""
from django.urls import path, include

urlpatterns = [
    # 商品模块API
    path('', include('products.urls')),
]
