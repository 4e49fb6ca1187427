"""
商品基础设施层数据库模型。
定义与商品领域相关的Django ORM模型，表结构由外部负责创建。
"""
from django.db import models


class Category(models.Model):
    """商品分类数据库模型，首次被商品引用时创建，所有商品共享"""
    name = models.CharField(max_length=100, unique=True, verbose_name="分类名称")

    class Meta:
        app_label = 'products'
        db_table = 'categories'
        verbose_name = "商品分类"
        verbose_name_plural = "商品分类"

    def __str__(self):
        return self.name


class Product(models.Model):
    """商品数据库模型，自增id仅用于关联表"""
    name = models.CharField(max_length=200, unique=True, verbose_name="商品名称")
    sku = models.PositiveIntegerField(verbose_name="SKU")
    price = models.PositiveBigIntegerField(verbose_name="价格(最小货币单位)")
    created_at = models.DateTimeField(auto_now_add=True, verbose_name="创建时间")

    class Meta:
        app_label = 'products'
        db_table = 'products'
        verbose_name = "商品"
        verbose_name_plural = "商品"
        indexes = [
            models.Index(fields=['created_at'], name='idx_product_created'),
        ]
        constraints = [
            models.CheckConstraint(condition=models.Q(sku__gt=0), name='product_sku_gt_0'),
            models.CheckConstraint(condition=models.Q(price__gt=0), name='product_price_gt_0'),
        ]

    def __str__(self):
        return self.name


class ProductCategory(models.Model):
    """商品与分类的多对多关联"""
    product = models.ForeignKey(
        Product,
        on_delete=models.CASCADE,
        related_name='category_links',
        verbose_name="商品"
    )
    category = models.ForeignKey(
        Category,
        on_delete=models.CASCADE,
        related_name='product_links',
        verbose_name="分类"
    )

    class Meta:
        app_label = 'products'
        db_table = 'product_categories'
        verbose_name = "商品分类关联"
        verbose_name_plural = "商品分类关联"
        constraints = [
            models.UniqueConstraint(fields=['product', 'category'], name='uniq_product_category'),
        ]

    def __str__(self):
        return f"{self.product_id}-{self.category_id}"
