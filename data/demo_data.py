"""测试数据总表：进程启动时构建一次，只读

通过 conftest 的 ``demo_data`` fixture 显式传给用例，而不是在用例里到处 import 全局常量。
生成器函数都基于当前时间或固定表，并发 worker 之间无共享可变状态。
"""
import random
import time
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from types import MappingProxyType

from data import api_data, checkout_data, login_data, product_data

TODO_ITEMS = (
    "Buy groceries",
    "Walk the dog",
    "Read a book",
    "Write tests",
    "Deploy to production",
)

RANDOM_TODO_ITEMS = (
    "Complete project documentation",
    "Review pull requests",
    "Update test cases",
    "Fix reported bugs",
    "Attend team meeting",
)


@dataclass(frozen=True)
class DemoData:
    users: MappingProxyType
    invalid_logins: MappingProxyType
    products: MappingProxyType
    product_sort: MappingProxyType
    checkout_info: MappingProxyType
    checkout_errors: MappingProxyType
    todo_items: tuple
    fakestore_credentials: MappingProxyType


DEMO_DATA = DemoData(
    users=login_data.USERS,
    invalid_logins=login_data.INVALID_LOGINS,
    products=product_data.PRODUCTS,
    product_sort=product_data.PRODUCT_SORT,
    checkout_info=checkout_data.CHECKOUT_INFO,
    checkout_errors=checkout_data.CHECKOUT_ERRORS,
    todo_items=TODO_ITEMS,
    fakestore_credentials=api_data.FAKESTORE_CREDENTIALS,
)


# ================= 生成器 =================
def generate_random_email() -> str:
    return f"test{time.time_ns()}@example.com"


def generate_random_username() -> str:
    return f"user{time.time_ns()}"


def generate_random_todo_item() -> str:
    return random.choice(RANDOM_TODO_ITEMS)


def get_current_date() -> str:
    """UTC 日期 YYYY-MM-DD"""
    return datetime.now(timezone.utc).date().isoformat()


def get_future_date(days_from_now: int) -> str:
    return (datetime.now(timezone.utc) + timedelta(days=days_from_now)).date().isoformat()
