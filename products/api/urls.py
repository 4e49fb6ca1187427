"""
商品API URL配置。
定义RESTful API的路由映射。
"""
from django.urls import path
from products.api import views

# API URL模式
urlpatterns = [
    # 商品API
    path('products', views.ProductListCreateView.as_view(), name='product-list-create'),
    path('products/<str:name>', views.ProductDetailView.as_view(), name='product-detail'),
]
