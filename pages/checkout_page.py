import logging
from decimal import Decimal
from typing import Optional

from playwright.sync_api import Page

from assertions.check_out_assert import CheckOutAssert
from config.locators import CHECKOUT_LOCATORS
from config.pages import URLS, ENV, PATHS
from data.models import CheckoutInfo, OrderSummary
from pages.base_page import BasePage
from utils.common_utils import parse_money, parse_price, sum_money, totals_match

logger = logging.getLogger(__name__)


class CheckoutPage(BasePage):
    """checkout-step-one：收货人信息"""

    def __init__(self, page: Page, timeout: Optional[float] = None):
        super().__init__(page, timeout)
        self.page_title = page.locator(CHECKOUT_LOCATORS["page_title"])
        self.firstName_input = page.locator(CHECKOUT_LOCATORS["firstName_input"])  # firstName输入框
        self.lastName_input = page.locator(CHECKOUT_LOCATORS["lastName_input"])  # lastName输入框
        self.postalCode_input = page.locator(CHECKOUT_LOCATORS["postalCode_input"])  # postalCode输入框
        self.container_error_msg = page.locator(CHECKOUT_LOCATORS["container_error_msg"])  # 未填写点击下一步错误提示文案
        self.error_button = page.locator(CHECKOUT_LOCATORS["error_button"])  # 关闭错误提示
        self.cancel_button = page.locator(CHECKOUT_LOCATORS["step_one_cancel_button"])  # 取消按钮
        self.continue_button = page.locator(CHECKOUT_LOCATORS["continue_button"])  # 继续按钮

    # ========== 页面行为 ==========
    def open_step_one(self, url: str = URLS[ENV]["checkout_step_one"], timeout: Optional[float] = None):
        self.goto(url, timeout)

    def fill_checkout_information(self, first_name: str, last_name: str, postal_code: str,
                                  timeout: Optional[float] = None):
        self.fill(self.firstName_input, first_name, timeout)
        self.fill(self.lastName_input, last_name, timeout)
        self.fill(self.postalCode_input, postal_code, timeout)

    def fill_first_name(self, first_name: str, timeout: Optional[float] = None):
        self.fill(self.firstName_input, first_name, timeout)

    def fill_last_name(self, last_name: str, timeout: Optional[float] = None):
        self.fill(self.lastName_input, last_name, timeout)

    def fill_postal_code(self, postal_code: str, timeout: Optional[float] = None):
        self.fill(self.postalCode_input, postal_code, timeout)

    def click_continue(self, timeout: Optional[float] = None):
        self.click(self.continue_button, timeout)

    def complete_checkout_info(self, first_name: str, last_name: str, postal_code: str,
                               timeout: Optional[float] = None):
        logger.info("checkout info: %s %s %s", first_name, last_name, postal_code)
        self.fill_checkout_information(first_name, last_name, postal_code, timeout)
        self.click_continue(timeout)

    def submit_info(self, info: CheckoutInfo, timeout: Optional[float] = None):
        self.complete_checkout_info(info.first_name, info.last_name, info.postal_code, timeout)

    def click_cancel(self, timeout: Optional[float] = None):
        self.click(self.cancel_button, timeout)

    def close_error(self, timeout: Optional[float] = None):
        self.click(self.error_button, timeout)

    def clear_all_fields(self, timeout: Optional[float] = None):
        self.clear(self.firstName_input, timeout)
        self.clear(self.lastName_input, timeout)
        self.clear(self.postalCode_input, timeout)

    # ================= 数据获取 =================
    def get_page_title(self, timeout: Optional[float] = None) -> str:
        return self.get_text(self.page_title, timeout)

    def is_on_checkout_page(self) -> bool:
        return PATHS["checkout_step_one"] in self.get_current_url()

    def get_error_message(self, timeout: Optional[float] = None) -> str:
        return self.get_text(self.container_error_msg, timeout)

    def is_error_visible(self) -> bool:
        return self.is_visible(self.container_error_msg)

    def get_form_values(self, timeout: Optional[float] = None) -> CheckoutInfo:
        return CheckoutInfo(
            first_name=self.input_value(self.firstName_input, timeout),
            last_name=self.input_value(self.lastName_input, timeout),
            postal_code=self.input_value(self.postalCode_input, timeout),
        )

    def is_continue_button_enabled(self, timeout: Optional[float] = None) -> bool:
        return self.is_enabled(self.continue_button, timeout)

    # ========== checkout-step-one 基本验证 ==========
    def verify_container_empty(self, expect_error_msg: str, timeout: Optional[float] = None):
        self.wait_visible(self.container_error_msg, timeout)
        CheckOutAssert.tips_message(self.get_error_message(timeout), expect_error_msg)


class CheckoutOverviewPage(BasePage):
    """checkout-step-two：订单确认"""

    def __init__(self, page: Page, timeout: Optional[float] = None):
        super().__init__(page, timeout)
        self.page_title = page.locator(CHECKOUT_LOCATORS["page_title"])
        # 商品信息
        self.cart_items = page.locator(CHECKOUT_LOCATORS["item_list"])
        self.item_names = page.locator(CHECKOUT_LOCATORS["item_product_name"])
        self.item_prices = page.locator(CHECKOUT_LOCATORS["item_product_price"])
        self.item_quantities = page.locator(CHECKOUT_LOCATORS["item_quantity"])
        # 订单价格
        self.subtotal_label = page.locator(CHECKOUT_LOCATORS["products_price"])  # 商品总价格
        self.tax_label = page.locator(CHECKOUT_LOCATORS["tax_price"])  # 税费
        self.total_label = page.locator(CHECKOUT_LOCATORS["order_price"])  # 订单价格
        self.payment_info = page.locator(CHECKOUT_LOCATORS["payment_information"])  # 支付信息value
        self.shipping_info = page.locator(CHECKOUT_LOCATORS["shipping_information"])  # 运费信息value
        # 操作步骤
        self.cancel_button = page.locator(CHECKOUT_LOCATORS["step_two_cancel_button"])  # 取消按钮
        self.finish_button = page.locator(CHECKOUT_LOCATORS["finish_button"])  # 完成按钮

    # ========== 页面行为 ==========
    def open_step_two(self, url: str = URLS[ENV]["checkout_step_two"], timeout: Optional[float] = None):
        self.goto(url, timeout)

    def click_finish(self, timeout: Optional[float] = None):
        self.click(self.finish_button, timeout)

    def click_cancel(self, timeout: Optional[float] = None):
        self.click(self.cancel_button, timeout)

    def complete_order(self, timeout: Optional[float] = None):
        logger.info("finish order")
        self.click_finish(timeout)

    # ================= 数据获取 =================
    def get_page_title(self, timeout: Optional[float] = None) -> str:
        return self.get_text(self.page_title, timeout)

    def is_on_overview_page(self) -> bool:
        return PATHS["checkout_step_two"] in self.get_current_url()

    def get_item_names(self) -> list[str]:
        return self.get_all_texts(self.item_names)

    def get_item_prices(self) -> list[Decimal]:
        return [parse_price(p) for p in self.get_all_texts(self.item_prices)]

    def get_subtotal(self, timeout: Optional[float] = None) -> Decimal:
        return parse_money(self.get_text(self.subtotal_label, timeout))

    def get_tax(self, timeout: Optional[float] = None) -> Decimal:
        return parse_money(self.get_text(self.tax_label, timeout))

    def get_total(self, timeout: Optional[float] = None) -> Decimal:
        return parse_money(self.get_text(self.total_label, timeout))

    def get_order_summary(self, timeout: Optional[float] = None) -> OrderSummary:
        return OrderSummary(
            subtotal=self.get_subtotal(timeout),
            tax=self.get_tax(timeout),
            total=self.get_total(timeout),
            item_count=self.get_count(self.cart_items),
        )

    def get_payment_info(self, timeout: Optional[float] = None) -> str:
        return self.get_text(self.payment_info, timeout)

    def get_shipping_info(self, timeout: Optional[float] = None) -> str:
        return self.get_text(self.shipping_info, timeout)

    # ================= 计算校验 =================
    def sum_products_price(self) -> Decimal:
        return sum_money(self.get_item_prices())

    def verify_total_calculation(self, timeout: Optional[float] = None) -> bool:
        summary = self.get_order_summary(timeout)
        return totals_match(summary.subtotal, summary.tax, summary.total)

    def verify_order_base_info(self, timeout: Optional[float] = None):
        CheckOutAssert.not_empty(self.get_payment_info(timeout))
        CheckOutAssert.not_empty(self.get_shipping_info(timeout))
        # 只校验价格格式，不关心 label 文案
        CheckOutAssert.price_format(self.get_text(self.subtotal_label, timeout))
        CheckOutAssert.price_format(self.get_text(self.tax_label, timeout))
        CheckOutAssert.price_format(self.get_text(self.total_label, timeout))

        summary = self.get_order_summary(timeout)
        # 验证商品总价格
        CheckOutAssert.price_equal(self.sum_products_price(), summary.subtotal)
        # 验证订单总价格
        CheckOutAssert.order_price(summary.subtotal, summary.tax, summary.total)
