import logging
from typing import Optional

from playwright.sync_api import Page

from assertions.login_assert import LoginAssert
from config.locators import LOGIN_LOCATORS
from config.pages import URLS, ENV
from config.settings import BASE_URL
from data.models import Credentials
from pages.base_page import BasePage

logger = logging.getLogger(__name__)


class LoginPage(BasePage):
    def __init__(self, page: Page, timeout: Optional[float] = None):
        super().__init__(page, timeout)
        self.username_input = page.locator(LOGIN_LOCATORS["username_input"])  # 用户名输入框
        self.password_input = page.locator(LOGIN_LOCATORS["password_input"])  # 密码输入框
        self.login_button = page.locator(LOGIN_LOCATORS["login_button"])  # 登录按钮
        self.error_message = page.locator(LOGIN_LOCATORS["error_msg"])  # 登录校验错误提示信息
        self.error_button = page.locator(LOGIN_LOCATORS["error_button"])  # 关闭错误提示

    # ================= 页面行为 =================
    def open_login(self, login_url: str = URLS[ENV]["login"], timeout: Optional[float] = None):
        self.goto(login_url, timeout)
        self.wait_visible(self.username_input, timeout)

    def login(self, username: str, password: str, timeout: Optional[float] = None):
        logger.info("login as %r", username)
        self.fill(self.username_input, username, timeout)
        self.fill(self.password_input, password, timeout)
        self.click(self.login_button, timeout)

    def login_as(self, credentials: Credentials, timeout: Optional[float] = None):
        self.login(credentials.username, credentials.password, timeout)

    def fill_username(self, username: str, timeout: Optional[float] = None):
        self.fill(self.username_input, username, timeout)

    def fill_password(self, password: str, timeout: Optional[float] = None):
        self.fill(self.password_input, password, timeout)

    def click_login(self, timeout: Optional[float] = None):
        self.click(self.login_button, timeout)

    def close_error_message(self, timeout: Optional[float] = None):
        self.click(self.error_button, timeout)

    def clear_username(self, timeout: Optional[float] = None):
        self.clear(self.username_input, timeout)

    def clear_password(self, timeout: Optional[float] = None):
        self.clear(self.password_input, timeout)

    # ================= 数据获取 =================
    def get_error_message(self, timeout: Optional[float] = None) -> str:
        return self.get_text(self.error_message, timeout)

    def is_error_message_visible(self) -> bool:
        return self.is_visible(self.error_message)

    def is_login_button_enabled(self, timeout: Optional[float] = None) -> bool:
        return self.is_enabled(self.login_button, timeout)

    def get_username_value(self, timeout: Optional[float] = None) -> str:
        return self.input_value(self.username_input, timeout)

    def get_password_value(self, timeout: Optional[float] = None) -> str:
        return self.input_value(self.password_input, timeout)

    def is_on_login_page(self) -> bool:
        url = self.get_current_url()
        return url.startswith(BASE_URL) and "inventory" not in url

    # ========== 登录校验 ==========
    def verify_login_success(self, pattern: str, timeout: Optional[float] = None):
        self.wait_url(pattern, timeout)

    def verify_login_fail(self, expect_msg: str, timeout: Optional[float] = None):
        self.wait_visible(self.error_message, timeout)
        LoginAssert.error_message(self.get_error_message(timeout), expect_msg)
