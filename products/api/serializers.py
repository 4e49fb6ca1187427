"""
商品API序列化器。
只负责请求的类型解析，业务校验由领域模型完成。
"""
from rest_framework import serializers


class ProductCreateSerializer(serializers.Serializer):
    """创建商品请求序列化器"""
    name = serializers.CharField(max_length=200, required=True, allow_blank=True, trim_whitespace=False)
    sku = serializers.IntegerField(required=True)
    categories = serializers.ListField(
        child=serializers.CharField(max_length=100, allow_blank=True, trim_whitespace=False),
        required=True,
        allow_empty=True
    )
    price = serializers.IntegerField(required=True)


class ProductSerializer(serializers.Serializer):
    """商品响应序列化器"""
    name = serializers.CharField()
    sku = serializers.IntegerField()
    categories = serializers.ListField(child=serializers.CharField())
    price = serializers.IntegerField()


class RepositoryMetricsSerializer(serializers.Serializer):
    """仓储统计指标响应序列化器"""
    total = serializers.IntegerField()
    total_value = serializers.IntegerField()
    average_price = serializers.FloatField()
    by_category = serializers.DictField(child=serializers.IntegerField())
