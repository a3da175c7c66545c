from decimal import Decimal
from types import MappingProxyType

from data.models import Product

PRODUCTS = MappingProxyType({
    "backpack": Product("Sauce Labs Backpack", Decimal("29.99")),
    "bike_light": Product("Sauce Labs Bike Light", Decimal("9.99")),
    "bolt_tshirt": Product("Sauce Labs Bolt T-Shirt", Decimal("15.99")),
    "fleece_jacket": Product("Sauce Labs Fleece Jacket", Decimal("49.99")),
    "onesie": Product("Sauce Labs Onesie", Decimal("7.99")),
    "tshirt_red": Product("Test.allTheThings() T-Shirt (Red)", Decimal("15.99")),
})

PRODUCT_COUNT = 6  # SauceDemo 固定 6 个商品
PRODUCT_PRICE_CEILING = Decimal("100")  # 所有商品价格 < $100

# sort_by 下拉框 value
PRODUCT_SORT = MappingProxyType({
    "name_asc": "az",
    "name_desc": "za",
    "price_asc": "lohi",
    "price_desc": "hilo",
})

PRODUCTS_PAGE_TITLE = "Products"
CART_PAGE_TITLE = "Your Cart"
BUTTON_ADD = "Add to cart"
BUTTON_REMOVE = "Remove"
BACKPACK_DESC_FRAGMENT = "carry.allTheThings()"
