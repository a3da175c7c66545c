import os


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    return int(value) if value else default


BASE_URL = os.getenv("BASE_URL", "https://www.saucedemo.com").rstrip("/")

BROWSER = os.getenv("BROWSER", "chromium")  # chromium / firefox / webkit
HEADLESS = _env_bool("HEADLESS", True)
CI = _env_bool("CI", False)

# 毫秒
ACTION_TIMEOUT = _env_int("ACTION_TIMEOUT", 10_000)
EXPECT_TIMEOUT = _env_int("EXPECT_TIMEOUT", 5_000)
NAVIGATION_TIMEOUT = _env_int("NAVIGATION_TIMEOUT", 30_000)
WAIT_FOR_ELEMENT_TIMEOUT = 5_000

VIDEO_SIZE = {"width": 1280, "height": 720}
