"""测试数据与页面读取结果的值对象（全部不可变）"""
from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class Credentials:
    username: str
    password: str


@dataclass(frozen=True)
class LoginCase:
    """登录失败场景：账号 + 期望错误提示片段"""
    username: str
    password: str
    error_msg: str


@dataclass(frozen=True)
class Product:
    name: str
    price: Decimal


@dataclass(frozen=True)
class ProductDetails:
    name: str
    price: Decimal
    description: str


@dataclass(frozen=True)
class CartLineItem:
    name: str
    price: Decimal
    quantity: int


@dataclass(frozen=True)
class CheckoutInfo:
    first_name: str
    last_name: str
    postal_code: str


@dataclass(frozen=True)
class OrderSummary:
    subtotal: Decimal
    tax: Decimal
    total: Decimal
    item_count: int
