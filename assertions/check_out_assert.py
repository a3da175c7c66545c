from decimal import Decimal
import re

from utils.common_utils import totals_match


class CheckOutAssert:

    @staticmethod
    def tips_message(actual_msg: str, expect_msg: str):
        """页面提示文案包含预期片段"""
        assert expect_msg in actual_msg, f"预期提示信息：{expect_msg}，不存在于{actual_msg}"

    @staticmethod
    def not_empty(column: str):
        assert column.strip() != "", f"{column!r}为空！"

    @staticmethod
    def price_format(price: str):
        """只关心price格式，不关心具体 label 文案
           UI 改文案测试不炸"""
        assert re.match(r"^[A-Za-z ]+: \$\d+(\.\d{2})$", price), f"价格格式错误：{price}"

    @staticmethod
    def price_equal(expect: Decimal, actual: Decimal):
        assert expect == actual, f"预期价格：{expect}!={actual}"

    @staticmethod
    def order_price(item_price: Decimal, tax: Decimal, order_price: Decimal):
        """商品总价 + 税 = 订单总价（误差 < 0.01）"""
        assert totals_match(item_price, tax, order_price), \
            f"实际总金额{order_price}!=预期总金额{item_price + tax}"
