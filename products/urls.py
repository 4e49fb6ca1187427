"""
商品模块URL配置。
包含API路由、指标和健康检查路由。
"""
from django.urls import path, include

from products.api import views

urlpatterns = [
    # API路由
    path('api/v1/', include('products.api.urls')),

    # 指标和健康检查
    path('metrics', views.MetricsView.as_view(), name='metrics'),
    path('health', views.HealthView.as_view(), name='health'),
]
