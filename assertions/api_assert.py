import re
from typing import Iterable


class ApiAssert:

    @staticmethod
    def status(actual: int, expect: int):
        assert actual == expect, f"HTTP 状态码错误：{actual}!={expect}"

    @staticmethod
    def has_keys(obj: dict, keys: Iterable[str]):
        missing = [key for key in keys if key not in obj]
        assert not missing, f"响应缺少字段：{missing}，实际字段：{list(obj)}"

    @staticmethod
    def non_empty_list(value):
        assert isinstance(value, list), f"响应不是 list：{type(value).__name__}"
        assert len(value) > 0, "响应 list 为空"

    @staticmethod
    def all_match(items: list[dict], field: str, expect):
        for item in items:
            assert item[field] == expect, f"{field}={item[field]!r}，预期{expect!r}：{item}"

    @staticmethod
    def strictly_descending(values: list):
        for current, following in zip(values, values[1:]):
            assert current > following, f"未严格倒序：{values}"

    @staticmethod
    def matches(value: str, pattern: str):
        assert re.match(pattern, value), f"{value!r} 不匹配 {pattern}"

    @staticmethod
    def faster_than(elapsed_ms: float, limit_ms: float):
        assert elapsed_ms < limit_ms, f"响应时间 {elapsed_ms:.0f}ms 超过 {limit_ms}ms"
