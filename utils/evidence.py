"""失败证据落盘：截图 / URL / console error / video / trace，并挂到 allure 报告"""
import json
import logging
import shutil
from pathlib import Path
from typing import Optional

import allure

logger = logging.getLogger(__name__)

ARTIFACTS_ROOT = Path("artifacts")
VIDEOS_ROOT = Path("videos")
TRACING_ROOT = Path("tracing")

SCREENSHOT_NAME = "failure.png"
URL_NAME = "url.txt"
CONSOLE_NAME = "console_errors.json"
TRACE_NAME = "trace.zip"


def reset_dirs(*dirs):
    """删掉上一轮残留，再建空目录"""
    for d in map(Path, dirs):
        if d.exists():
            shutil.rmtree(d)
        d.mkdir(parents=True)


def attempt_label(attempt: int) -> str:
    return f"attempt_{attempt}"


def evidence_dir(module: str, cls: Optional[str], test: str, attempt: int,
                 root: Path = ARTIFACTS_ROOT) -> Path:
    """artifacts/<module>/<class>/<test>/attempt_<n>/"""
    target = root / module.split(".")[-1] / (cls or "no_class") / test / attempt_label(attempt)
    target.mkdir(parents=True, exist_ok=True)
    return target


def save_page_evidence(url: str, console_errors: list, target: Path):
    (target / URL_NAME).write_text(url, encoding="utf-8")
    console_file = target / CONSOLE_NAME
    console_file.write_text(json.dumps(console_errors, indent=2, ensure_ascii=False), encoding="utf-8")

    screenshot = target / SCREENSHOT_NAME
    if screenshot.exists():
        allure.attach.file(screenshot, name="Failure-Screenshot", attachment_type=allure.attachment_type.PNG)
    allure.attach.file(console_file, name="Console-Errors", attachment_type=allure.attachment_type.JSON)
    allure.attach(url, name="URL", attachment_type=allure.attachment_type.TEXT)


def keep_recordings(video_dir: Path, trace_file: Path, target: Path) -> list[Path]:
    """失败 attempt：video / trace 移到证据目录并 attach"""
    kept = []
    for video in Path(video_dir).glob("*.webm"):
        moved = Path(shutil.move(str(video), str(target / video.name)))
        allure.attach.file(moved, name="Video", attachment_type=allure.attachment_type.WEBM)
        kept.append(moved)
    if Path(trace_file).exists():
        moved = Path(shutil.move(str(trace_file), str(target / TRACE_NAME)))
        allure.attach.file(moved, name="Playwright-Trace.zip")
        kept.append(moved)
    logger.info("failure evidence -> %s", target)
    return kept


def discard_recordings(*dirs):
    # 成功 attempt 不保留录像
    for d in dirs:
        shutil.rmtree(d, ignore_errors=True)
