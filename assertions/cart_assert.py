from decimal import Decimal


class CartAssert:

    @staticmethod
    def cart_badge_count(actual: int, expect: int):
        """购物车图标显示数字"""
        assert actual == expect, f"购物车角标显示的加购商品数量错误：{actual}!={expect}"

    @staticmethod
    def item_count(actual: int, expect: int):
        """购物车页面商品行数"""
        assert actual == expect, f"购物车页面商品数量错误：{actual}!={expect}"

    @staticmethod
    def contains_products(cart_names: list[str], expected_names: list[str]):
        """加购商品都在购物车页？"""
        for name in expected_names:
            assert name in cart_names, f"加购的商品{name}，在购物车页面不存在：{cart_names}"

    @staticmethod
    def cart_total(actual: Decimal, expect: Decimal):
        assert actual == expect, f"购物车合计金额错误：{actual}!={expect}"
