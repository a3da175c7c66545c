from types import MappingProxyType

from data.models import CheckoutInfo

CHECKOUT_INFO = MappingProxyType({
    "valid": CheckoutInfo("John", "Doe", "12345"),
    "missing_first_name": CheckoutInfo("", "Doe", "12345"),
    "missing_last_name": CheckoutInfo("John", "", "12345"),
    "missing_postal_code": CheckoutInfo("John", "Doe", ""),
    "special_characters": CheckoutInfo("Mary-Jane O'Brien", "Smith-Jones", "12345"),
    "zip_plus_four": CheckoutInfo("John", "Doe", "12345-6789"),
})

# 收货人信息为空时的错误提示，校验顺序：first -> last -> postal
CHECKOUT_ERRORS = MappingProxyType({
    "missing_first_name": "First Name is required",
    "missing_last_name": "Last Name is required",
    "missing_postal_code": "Postal Code is required",
})

CHECKOUT_STEP_ONE_TITLE = "Checkout: Your Information"
CHECKOUT_STEP_TWO_TITLE = "Checkout: Overview"
FINISH_PAGE_MESSAGE = "Thank you for your order"
