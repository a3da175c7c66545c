import os

from config.settings import BASE_URL

ENV = os.getenv("TEST_ENV", "prod")

URLS = {
    "prod": {
        "login": f"{BASE_URL}/",
        "inventory": f"{BASE_URL}/inventory.html",
        "inventory_item": f"{BASE_URL}/inventory-item.html",
        "cart": f"{BASE_URL}/cart.html",
        "checkout_step_one": f"{BASE_URL}/checkout-step-one.html",
        "checkout_step_two": f"{BASE_URL}/checkout-step-two.html",
        "checkout_complete": f"{BASE_URL}/checkout-complete.html",
    },
}

# URL 片段，用于 wait_url / is_on_xxx_page 判断
PATHS = {
    "inventory": "inventory.html",
    "inventory_item": "inventory-item.html",
    "cart": "cart.html",
    "checkout_step_one": "checkout-step-one.html",
    "checkout_step_two": "checkout-step-two.html",
    "checkout_complete": "checkout-complete.html",
}
