import logging
import re
from pathlib import Path
from typing import Optional, Union

from playwright.sync_api import Locator, Page, expect

from config.settings import ACTION_TIMEOUT, WAIT_FOR_ELEMENT_TIMEOUT

logger = logging.getLogger(__name__)


class PageCapability:
    page: Page
    timeout: float

    def _timeout(self, timeout: Optional[float]) -> float:
        return self.timeout if timeout is None else timeout


class Navigable(PageCapability):
    """页面级能力：跳转、等待 URL、截图"""

    SCREENSHOT_DIR = Path("screenshots")

    # ========= 基础动作 =========
    def goto(self, url: str, timeout: Optional[float] = None):
        logger.info("goto %s", url)
        self.page.goto(url, timeout=self._timeout(timeout))

    def get_current_url(self) -> str:
        return self.page.url

    def get_title(self) -> str:
        return self.page.title()

    def reload(self, timeout: Optional[float] = None):
        self.page.reload(timeout=self._timeout(timeout))

    def go_back(self, timeout: Optional[float] = None):
        self.page.go_back(timeout=self._timeout(timeout))

    # ========= 等待 =========
    def wait_for_navigation(self, state: str = "networkidle", timeout: Optional[float] = None):
        self.page.wait_for_load_state(state, timeout=self._timeout(timeout))

    def wait_url(self, pattern: str, timeout: Optional[float] = None):
        expect(self.page).to_have_url(re.compile(pattern), timeout=self._timeout(timeout))

    def wait(self, milliseconds: float):
        """固定等待，尽量少用"""
        self.page.wait_for_timeout(milliseconds)

    # ========= 辅助 =========
    def take_screenshot(self, name: str, timeout: Optional[float] = None) -> Path:
        self.SCREENSHOT_DIR.mkdir(parents=True, exist_ok=True)
        path = self.SCREENSHOT_DIR / f"{name}.png"
        self.page.screenshot(path=path, full_page=True, timeout=self._timeout(timeout))
        logger.info("screenshot saved -> %s", path)
        return path


class Interactable(PageCapability):
    """元素级能力：所有会等待的方法都接受显式 timeout（毫秒），None 表示用页面对象默认值"""

    # ========= 等待 =========
    def wait_for_element(self, locator: Locator, timeout: float = WAIT_FOR_ELEMENT_TIMEOUT):
        locator.wait_for(state="visible", timeout=timeout)

    def wait_visible(self, locator: Locator, timeout: Optional[float] = None):
        expect(locator).to_be_visible(timeout=self._timeout(timeout))

    # ========= 状态 =========
    def is_visible(self, locator: Locator) -> bool:
        # is_visible 不等待，立即返回当前状态
        return locator.is_visible()

    def is_enabled(self, locator: Locator, timeout: Optional[float] = None) -> bool:
        return locator.is_enabled(timeout=self._timeout(timeout))

    # ========= 基础动作 =========
    def click(self, locator: Locator, timeout: Optional[float] = None):
        logger.debug("click %s", locator)
        locator.click(timeout=self._timeout(timeout))

    def fill(self, locator: Locator, value: str, timeout: Optional[float] = None):
        logger.debug("fill %s", locator)
        locator.fill(value, timeout=self._timeout(timeout))

    def clear(self, locator: Locator, timeout: Optional[float] = None):
        locator.clear(timeout=self._timeout(timeout))

    def scroll_to_element(self, locator: Locator, timeout: Optional[float] = None):
        locator.scroll_into_view_if_needed(timeout=self._timeout(timeout))

    def select_option(self, locator: Locator, value: str, timeout: Optional[float] = None):
        locator.select_option(value, timeout=self._timeout(timeout))

    # ========= 读取 =========
    def get_text(self, locator: Locator, timeout: Optional[float] = None) -> str:
        return locator.text_content(timeout=self._timeout(timeout)) or ""

    def input_value(self, locator: Locator, timeout: Optional[float] = None) -> str:
        return locator.input_value(timeout=self._timeout(timeout))

    def get_all_texts(self, locator: Locator) -> list[str]:
        return locator.all_text_contents()

    def get_attrs(self, locator: Locator, attr: str, timeout: Optional[float] = None) -> list[str]:
        return [locator.nth(i).get_attribute(attr, timeout=self._timeout(timeout)) or ""
                for i in range(locator.count())]

    def get_count(self, locator: Locator) -> int:
        return locator.count()


class BasePage(Navigable, Interactable):

    def __init__(self, page: Page, timeout: Optional[Union[int, float]] = None):
        self.page = page
        self.timeout = ACTION_TIMEOUT if timeout is None else timeout
