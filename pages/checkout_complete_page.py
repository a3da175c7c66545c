from typing import Optional

from playwright.sync_api import Page

from assertions.check_out_assert import CheckOutAssert
from config.locators import CHECKOUT_COMPLETE_LOCATORS
from config.pages import URLS, ENV, PATHS
from pages.base_page import BasePage

SUCCESS_HEADER_FRAGMENT = "Thank you"


class CheckoutCompletePage(BasePage):
    def __init__(self, page: Page, timeout: Optional[float] = None):
        super().__init__(page, timeout)
        self.page_title = page.locator(CHECKOUT_COMPLETE_LOCATORS["page_title"])
        self.complete_header = page.locator(CHECKOUT_COMPLETE_LOCATORS["complete_header"])  # 完成页面提示信息
        self.complete_text = page.locator(CHECKOUT_COMPLETE_LOCATORS["complete_text"])
        self.back_home_button = page.locator(CHECKOUT_COMPLETE_LOCATORS["back_home_button"])
        self.pony_express_image = page.locator(CHECKOUT_COMPLETE_LOCATORS["pony_express_image"])

    def open_complete(self, url: str = URLS[ENV]["checkout_complete"], timeout: Optional[float] = None):
        self.goto(url, timeout)

    def get_page_title(self, timeout: Optional[float] = None) -> str:
        return self.get_text(self.page_title, timeout)

    def is_on_complete_page(self) -> bool:
        return PATHS["checkout_complete"] in self.get_current_url()

    def get_success_header(self, timeout: Optional[float] = None) -> str:
        return self.get_text(self.complete_header, timeout)

    def get_success_message(self, timeout: Optional[float] = None) -> str:
        return self.get_text(self.complete_text, timeout)

    def is_success_message_displayed(self) -> bool:
        return self.is_visible(self.complete_header)

    def is_pony_express_image_visible(self) -> bool:
        return self.is_visible(self.pony_express_image)

    def click_back_home(self, timeout: Optional[float] = None):
        self.click(self.back_home_button, timeout)

    def return_to_products(self, timeout: Optional[float] = None):
        self.click_back_home(timeout)

    def verify_order_complete(self, timeout: Optional[float] = None) -> bool:
        # 先读 header（会等待元素出现），再取即时状态
        header = self.get_success_header(timeout)
        header_visible = self.is_success_message_displayed()
        on_correct_page = self.is_on_complete_page()
        return header_visible and on_correct_page and SUCCESS_HEADER_FRAGMENT in header

    # ========== 提交订单页面 ==========
    def verify_submit_order(self, finish_message: str, timeout: Optional[float] = None):
        self.wait_visible(self.complete_header, timeout)
        CheckOutAssert.tips_message(self.get_success_header(timeout), finish_message)
