import logging
from decimal import Decimal
from typing import Iterable, Optional

from playwright.sync_api import Locator, Page

from assertions.cart_assert import CartAssert
from config.locators import CART_LOCATORS
from config.pages import URLS, ENV, PATHS
from data.models import CartLineItem
from data.product_data import BUTTON_REMOVE
from pages.base_page import BasePage
from utils.common_utils import parse_price, parse_quantity, sum_money

logger = logging.getLogger(__name__)


class CartPage(BasePage):
    def __init__(self, page: Page, timeout: Optional[float] = None):
        super().__init__(page, timeout)
        self.page_title = page.locator(CART_LOCATORS["page_title"])
        # cart 页商品行
        self.cart_items = page.locator(CART_LOCATORS["cart_item"])
        self.cart_item_names = page.locator(CART_LOCATORS["item_product_name"])
        self.cart_item_prices = page.locator(CART_LOCATORS["item_product_price"])
        self.cart_item_quantities = page.locator(CART_LOCATORS["item_quantity"])
        self.remove_product_button = page.locator(CART_LOCATORS["remove_product_button"])  # remove商品按钮

        self.continue_shopping_button = page.locator(CART_LOCATORS["continue"])  # continue-shopping按钮
        self.checkout_button = page.locator(CART_LOCATORS["checkout_button"])  # 结算按钮
        self.shopping_cart_badge = page.locator(CART_LOCATORS["shopping_cart_badge"])  # 购物车显示商品数

    def _cart_item(self, product_name: str) -> Locator:
        return self.cart_items.filter(has=self.page.get_by_text(product_name, exact=True))

    # ================= 页面行为 =================
    def open_cart(self, cart_url: str = URLS[ENV]["cart"], timeout: Optional[float] = None):
        self.goto(cart_url, timeout)

    def remove_item_by_name(self, product_name: str, timeout: Optional[float] = None):
        logger.info("remove from cart page: %s", product_name)
        self.click(self._cart_item(product_name).locator(CART_LOCATORS["item_button"]), timeout)

    def remove_item_by_index(self, index: int, timeout: Optional[float] = None):
        self.click(self.remove_product_button.nth(index), timeout)

    def remove_all_items(self, timeout: Optional[float] = None):
        # 从最后一行往前删，删除后前面的 index 不会变
        for i in reversed(range(self.get_count(self.remove_product_button))):
            self.remove_item_by_index(i, timeout)

    def continue_shopping(self, timeout: Optional[float] = None):
        self.click(self.continue_shopping_button, timeout)

    def proceed_to_checkout(self, timeout: Optional[float] = None):
        self.click(self.checkout_button, timeout)

    # ================= 数据获取 =================
    def get_page_title(self, timeout: Optional[float] = None) -> str:
        return self.get_text(self.page_title, timeout)

    def is_on_cart_page(self) -> bool:
        return PATHS["cart"] in self.get_current_url()

    def get_cart_item_count(self) -> int:
        """购物车页面的商品行数"""
        return self.get_count(self.cart_items)

    def get_cart_item_names(self) -> list[str]:
        return self.get_all_texts(self.cart_item_names)

    def get_cart_item_prices(self) -> list[Decimal]:
        return [parse_price(p) for p in self.get_all_texts(self.cart_item_prices)]

    def get_cart_item_quantities(self) -> list[int]:
        return [parse_quantity(q) for q in self.get_all_texts(self.cart_item_quantities)]

    def get_cart_items(self) -> list[CartLineItem]:
        """ 保存购物车页面商品信息list"""
        items = []
        for i in range(self.get_cart_item_count()):
            row = self.cart_items.nth(i)
            items.append(self._read_line_item(row))
        return items

    def get_cart_item_details(self, product_name: str, timeout: Optional[float] = None) -> CartLineItem:
        return self._read_line_item(self._cart_item(product_name), timeout)

    def _read_line_item(self, row: Locator, timeout: Optional[float] = None) -> CartLineItem:
        # 文本缺失时价格按 $0、数量按 1 处理；文本存在但格式错误直接抛 ParseError
        name = self.get_text(row.locator(CART_LOCATORS["item_product_name"]), timeout)
        price_text = self.get_text(row.locator(CART_LOCATORS["item_product_price"]), timeout) or "$0"
        qty_text = self.get_text(row.locator(CART_LOCATORS["item_quantity"]), timeout) or "1"
        return CartLineItem(name=name, price=parse_price(price_text), quantity=parse_quantity(qty_text))

    def get_product_description(self, product_name: str, timeout: Optional[float] = None) -> str:
        return self.get_text(self._cart_item(product_name).locator(CART_LOCATORS["item_product_desc"]), timeout)

    def calculate_cart_total(self) -> Decimal:
        """
        各行价格之和，不乘数量。
        SauceDemo 每个商品在购物车里数量固定为 1，所以和页面 Item total 一致。
        """
        return sum_money(self.get_cart_item_prices())

    def is_cart_empty(self) -> bool:
        return self.get_cart_item_count() == 0

    def is_product_in_cart(self, product_name: str, timeout: Optional[float] = None) -> bool:
        """商品行存在且按钮文案为 Remove"""
        row = self._cart_item(product_name)
        if self.get_count(row) == 0:
            return False
        return self.get_text(row.locator(CART_LOCATORS["item_button"]), timeout) == BUTTON_REMOVE

    def verify_cart_contents(self, expected_items: Iterable[str], timeout: Optional[float] = None) -> bool:
        return all(self.is_product_in_cart(name, timeout) for name in expected_items)

    def is_checkout_button_enabled(self, timeout: Optional[float] = None) -> bool:
        return self.is_enabled(self.checkout_button, timeout)

    def get_cart_badge_count(self, timeout: Optional[float] = None) -> int:
        # 获取购物车显示的商品数字，角标不显示即为 0
        if not self.is_visible(self.shopping_cart_badge):
            return 0
        return parse_quantity(self.get_text(self.shopping_cart_badge, timeout) or "0")

    # ================= 基础验证 =================
    def verify_cart_matches(self, expected_names: list[str], expected_total: Decimal):
        CartAssert.cart_badge_count(self.get_cart_badge_count(), len(expected_names))
        CartAssert.item_count(self.get_cart_item_count(), len(expected_names))
        CartAssert.contains_products(self.get_cart_item_names(), expected_names)
        CartAssert.cart_total(self.calculate_cart_total(), expected_total)
