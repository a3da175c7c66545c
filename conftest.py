import logging

import pytest
from playwright.sync_api import Error as PlaywrightError, expect, sync_playwright

from config.settings import (ACTION_TIMEOUT, BASE_URL, BROWSER, EXPECT_TIMEOUT, HEADLESS,
                             NAVIGATION_TIMEOUT, VIDEO_SIZE)
from data.demo_data import DEMO_DATA
from data.login_data import SAVE_LOGIN_STATE_FILE, SAVE_LOGIN_STATE_PATH
from scripts.save_login_state import save_login_state
from utils.evidence import (ARTIFACTS_ROOT, SCREENSHOT_NAME, TRACE_NAME, TRACING_ROOT, VIDEOS_ROOT,
                            attempt_label, discard_recordings, evidence_dir, keep_recordings,
                            reset_dirs, save_page_evidence)

logger = logging.getLogger(__name__)


def pytest_configure(config):
    # expect() 断言默认等待时间
    expect.set_options(timeout=EXPECT_TIMEOUT)


def _attempt(node) -> int:
    # pytest-rerunfailures 写入 execution_count，未重跑时没有该属性
    return getattr(node, "execution_count", 1)


def _evidence_dir_for(item, attempt: int):
    cls = item.cls.__name__ if item.cls else None
    return evidence_dir(item.module.__name__, cls, item.name, attempt)


# ================== Session Fixtures ==================
@pytest.fixture(scope="session", autouse=True)
def clean_artifacts():
    """session 开始前清空上一轮的证据、录像和登录态"""
    reset_dirs(ARTIFACTS_ROOT, VIDEOS_ROOT, TRACING_ROOT, SAVE_LOGIN_STATE_PATH)


@pytest.fixture(scope="session")
def playwright_instance():
    with sync_playwright() as p:
        yield p


@pytest.fixture(scope="session")
def browser(playwright_instance):
    """整个 session 只启动一次浏览器"""
    launched = getattr(playwright_instance, BROWSER).launch(headless=HEADLESS)
    logger.info("%s launched, headless=%s", BROWSER, HEADLESS)
    yield launched
    launched.close()


@pytest.fixture(scope="session")
def login_state(browser) -> str:
    """need_login 用例第一次用到时才登录并保存 storage state"""
    state = save_login_state(SAVE_LOGIN_STATE_FILE, browser=browser)
    return str(state)


@pytest.fixture(scope="session")
def demo_data():
    """只读测试数据总表，显式注入给用例"""
    return DEMO_DATA


# ================== Function Fixtures ==================
@pytest.fixture(scope="function")
def context(browser, request):
    """
    每个用例独立的 BrowserContext：
    - 标了 need_login 的用例带登录态启动
    - 每个 attempt 单独录 video / trace，只有失败的会留下
    """
    # rerun 复用同一个 item，先清掉上一次 attempt 的失败标记
    request.node._failed = False
    label = attempt_label(_attempt(request.node))
    video_dir = VIDEOS_ROOT / request.node.name / label
    trace_file = TRACING_ROOT / request.node.name / label / TRACE_NAME
    trace_file.parent.mkdir(parents=True, exist_ok=True)

    storage_state = None
    if request.node.get_closest_marker("need_login"):
        storage_state = request.getfixturevalue("login_state")

    ctx = browser.new_context(
        base_url=BASE_URL,
        storage_state=storage_state,
        record_video_dir=str(video_dir),
        record_video_size=VIDEO_SIZE,
    )
    ctx.set_default_timeout(ACTION_TIMEOUT)
    ctx.set_default_navigation_timeout(NAVIGATION_TIMEOUT)
    ctx.tracing.start(name=label, screenshots=True, snapshots=True, sources=True)

    yield ctx

    try:
        ctx.tracing.stop(path=trace_file)
    finally:
        # close 之后 video 才会真正写完
        ctx.close()

    if getattr(request.node, "_failed", False):
        keep_recordings(video_dir, trace_file, _evidence_dir_for(request.node, _attempt(request.node)))
    discard_recordings(video_dir, trace_file.parent)


@pytest.fixture(scope="function")
def page(context):
    """每个用例一个新 page，收集 console.error"""
    new_page = context.new_page()
    errors = []
    new_page.on("console", lambda msg: errors.append(
        {"type": msg.type, "text": msg.text, "location": str(msg.location)}) if msg.type == "error" else None)
    new_page.console_errors = errors
    yield new_page
    new_page.close()


# ================== Pytest Hook ==================
@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """call 阶段失败：保存截图、URL、console error"""
    outcome = yield
    report = outcome.get_result()
    if report.when != "call" or not report.failed:
        return

    # context teardown 据此决定是否保留 video / trace
    item._failed = True

    ui_page = item.funcargs.get("page")
    if ui_page is None:
        return

    target = _evidence_dir_for(item, _attempt(item))
    url = ""
    try:
        url = ui_page.url
        ui_page.screenshot(path=target / SCREENSHOT_NAME, full_page=True)
    except PlaywrightError as exc:
        logger.warning("screenshot skipped for %s: %s", item.nodeid, exc)
    save_page_evidence(url, getattr(ui_page, "console_errors", []), target)
