import logging
from decimal import Decimal
from typing import Iterable, Optional

from playwright.sync_api import Locator, Page

from assertions.products_assert import ProductsAssert
from config.locators import PRODUCTS_LOCATORS
from config.pages import URLS, ENV, PATHS
from data.models import ProductDetails
from data.product_data import BUTTON_REMOVE
from pages.base_page import BasePage
from utils.common_utils import is_sorted_asc, is_sorted_desc, parse_price, parse_quantity

logger = logging.getLogger(__name__)

SORT_OPTIONS = ("az", "za", "lohi", "hilo")


class ProductsPage(BasePage):
    def __init__(self, page: Page, timeout: Optional[float] = None):
        super().__init__(page, timeout)
        self.page_title = page.locator(PRODUCTS_LOCATORS["page_title"])
        self.inventory_container = page.locator(PRODUCTS_LOCATORS["inventory_container"])
        # 商品列表
        self.item_product = page.locator(PRODUCTS_LOCATORS["item_product"])

        # 商品明细
        self.item_product_name = page.locator(PRODUCTS_LOCATORS["item_product_name"])
        self.item_product_price = page.locator(PRODUCTS_LOCATORS["item_product_price"])
        self.item_product_desc = page.locator(PRODUCTS_LOCATORS["item_product_desc"])
        self.item_product_img = page.locator(PRODUCTS_LOCATORS["item_product_img"])

        # 购物车
        self.shopping_cart_badge = page.locator(PRODUCTS_LOCATORS["shopping_cart_badge"])
        self.shopping_cart_link = page.locator(PRODUCTS_LOCATORS["shopping_cart_link"])

        # 排序下拉框
        self.product_sort_type = page.locator(PRODUCTS_LOCATORS["product_sort_type"])

        # 侧边菜单
        self.burger_menu = page.locator(PRODUCTS_LOCATORS["burger_menu"])
        self.logout_link = page.locator(PRODUCTS_LOCATORS["logout_link"])

    def _product_item(self, product_name: str) -> Locator:
        """按商品名称精确定位商品卡片"""
        return self.item_product.filter(has=self.page.get_by_text(product_name, exact=True))

    def _product_button(self, product_name: str) -> Locator:
        return self._product_item(product_name).locator(PRODUCTS_LOCATORS["item_button"])

    # ================= 页面行为 =================
    def open_inventory(self, inventory_url: str = URLS[ENV]["inventory"], timeout: Optional[float] = None):
        self.goto(inventory_url, timeout)
        self.wait_visible(self.item_product.first, timeout)

    def add_product_to_cart(self, product_name: str, timeout: Optional[float] = None):
        logger.info("add to cart: %s", product_name)
        self.click(self._product_button(product_name), timeout)

    def add_product_to_cart_by_index(self, index: int, timeout: Optional[float] = None):
        self.click(self.item_product.nth(index).locator(PRODUCTS_LOCATORS["item_button"]), timeout)

    def add_multiple_products(self, product_names: Iterable[str], timeout: Optional[float] = None):
        for name in product_names:
            self.add_product_to_cart(name, timeout)

    def remove_product_from_cart(self, product_name: str, timeout: Optional[float] = None):
        logger.info("remove from cart: %s", product_name)
        button = self._product_button(product_name).filter(has_text=BUTTON_REMOVE)
        self.click(button, timeout)

    def go_to_cart(self, timeout: Optional[float] = None):
        self.click(self.shopping_cart_link, timeout)

    def sort_by(self, option: str, timeout: Optional[float] = None):
        """option: az / za / lohi / hilo"""
        if option not in SORT_OPTIONS:
            raise ValueError(f"不支持的排序方式：{option}，可选 {SORT_OPTIONS}")
        self.wait_for_element(self.product_sort_type, self._timeout(timeout))
        self.select_option(self.product_sort_type, option, timeout)

    def click_product_name(self, product_name: str, timeout: Optional[float] = None):
        self.click(self._product_item(product_name).locator(PRODUCTS_LOCATORS["item_product_name"]), timeout)

    def logout(self, timeout: Optional[float] = None):
        self.click(self.burger_menu, timeout)
        self.click(self.logout_link, timeout)

    # ================= 数据获取 =================
    def get_page_title(self, timeout: Optional[float] = None) -> str:
        return self.get_text(self.page_title, timeout)

    def is_on_products_page(self) -> bool:
        return PATHS["inventory"] in self.get_current_url()

    def get_product_count(self) -> int:
        return self.get_count(self.item_product)

    def get_all_product_names(self) -> list[str]:
        return self.get_all_texts(self.item_product_name)

    def get_product_description(self) -> list[str]:
        return self.get_all_texts(self.item_product_desc)

    def get_product_imgs(self) -> list[str]:
        return self.get_attrs(self.item_product_img, "src")

    def get_product_prices(self) -> list[str]:
        return self.get_all_texts(self.item_product_price)

    def get_all_product_prices(self) -> list[Decimal]:
        return [parse_price(p) for p in self.get_product_prices()]

    def get_first_product_name(self, timeout: Optional[float] = None) -> str:
        return self.get_text(self.item_product.first.locator(PRODUCTS_LOCATORS["item_product_name"]), timeout)

    def get_product_details(self, product_name: str, timeout: Optional[float] = None) -> ProductDetails:
        """保存单商品基本信息"""
        item = self._product_item(product_name)
        name = self.get_text(item.locator(PRODUCTS_LOCATORS["item_product_name"]), timeout)
        price_text = self.get_text(item.locator(PRODUCTS_LOCATORS["item_product_price"]), timeout) or "$0"
        description = self.get_text(item.locator(PRODUCTS_LOCATORS["item_product_desc"]), timeout)
        return ProductDetails(name=name, price=parse_price(price_text), description=description)

    def get_cart_item_count(self, timeout: Optional[float] = None) -> int:
        """购物车角标数字，角标不显示即为 0"""
        if not self.is_visible(self.shopping_cart_badge):
            return 0
        return parse_quantity(self.get_text(self.shopping_cart_badge, timeout) or "0")

    def is_product_in_cart(self, product_name: str, timeout: Optional[float] = None) -> bool:
        """按钮文案为 Remove 即视为已加购"""
        return self.get_text(self._product_button(product_name), timeout) == BUTTON_REMOVE

    # ================= 排序校验 =================
    def are_products_sorted_a_to_z(self) -> bool:
        return is_sorted_asc(self.get_all_product_names())

    def are_products_sorted_z_to_a(self) -> bool:
        return is_sorted_desc(self.get_all_product_names())

    def are_products_sorted_low_to_high(self) -> bool:
        return is_sorted_asc(self.get_all_product_prices())

    def are_products_sorted_high_to_low(self) -> bool:
        return is_sorted_desc(self.get_all_product_prices())

    # ========== 基础校验 ==========
    def verify_base_info(self, expect_count: int):
        ProductsAssert.product_count(self.get_product_count(), expect_count)  # 商品数量一致
        ProductsAssert.column_not_empty(self.get_all_product_names())  # 商品名称非空
        ProductsAssert.column_not_empty(self.get_product_description())  # 商品描述非空
        ProductsAssert.column_not_empty(self.get_product_imgs())  # 商品图片非空
        ProductsAssert.product_price_format(self.get_product_prices())  # 商品价格格式
        ProductsAssert.product_price_positive(self.get_all_product_prices())  # 商品价格 > 0
