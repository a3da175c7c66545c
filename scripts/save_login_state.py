import logging
from pathlib import Path

from playwright.sync_api import Browser, sync_playwright

from config.settings import BASE_URL, BROWSER, CI, HEADLESS
from data.login_data import USERS, LOGIN_SUCCESS_URL, SAVE_LOGIN_STATE_FILE
from pages.login_page import LoginPage

logger = logging.getLogger(__name__)


def _login_and_save(browser: Browser, state_file: str):
    context = browser.new_context(base_url=BASE_URL)
    try:
        # 使用 Page Object 登录
        login_page = LoginPage(context.new_page())
        login_page.open_login()
        login_page.login_as(USERS["standard"])
        login_page.verify_login_success(LOGIN_SUCCESS_URL)

        Path(state_file).parent.mkdir(parents=True, exist_ok=True)
        context.storage_state(path=state_file)  # cookie + localStorage 写入 login.json
    finally:
        context.close()


def save_login_state(state_file: str = SAVE_LOGIN_STATE_FILE, browser: Browser = None) -> Path:
    """生成登录态
        传入 browser 时复用（conftest 里 sync_playwright 已经启动，不能再嵌套启动）
        单独执行该脚本命令：python -m scripts.save_login_state
    """
    if browser is not None:
        _login_and_save(browser, state_file)
    else:
        with sync_playwright() as p:
            launched = getattr(p, BROWSER).launch(headless=HEADLESS or CI)  # CI 上强制无头
            try:
                _login_and_save(launched, state_file)
            finally:
                launched.close()

    # 再次校验文件
    login_path = Path(state_file)
    if not login_path.exists() or login_path.stat().st_size == 0:
        raise RuntimeError(f"{state_file} 生成失败，请检查浏览器或账号")
    logger.info("login state saved -> %s", login_path)
    return login_path


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    save_login_state()
