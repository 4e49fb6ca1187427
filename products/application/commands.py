"""
商品应用服务层的命令对象。
定义用于修改系统状态的命令。
"""
from typing import List


class CreateProductCommand:
    """创建商品命令"""

    def __init__(self, name: str, sku: int, categories: List[str], price: int):
        """
        初始化创建商品命令。

        Args:
            name: 商品名称
            sku: 商品SKU
            categories: 商品分类
            price: 商品价格（最小货币单位）
        """
        self.name = name
        self.sku = sku
        self.categories = categories
        self.price = price
