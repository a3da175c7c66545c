LOGIN_LOCATORS = {
    "username_input": "[data-test='username']",  # 用户名
    "password_input": "[data-test='password']",  # 用户密码
    "login_button": "[data-test='login-button']",  # 登录按钮
    "error_msg": "[data-test='error']",  # 登录错误提示信息
    "error_button": "[data-test='error-button']",  # 关闭错误提示
}

PRODUCTS_LOCATORS = {
    "page_title": "[data-test='title']",  # 页面标题 Products
    "inventory_container": "[data-test='inventory-container']",
    "item_product": "[data-test='inventory-item']",  # 商品列表
    "item_product_name": "[data-test='inventory-item-name']",  # 单商品名称
    "item_product_price": "[data-test='inventory-item-price']",  # 单商品价格
    "item_product_desc": "[data-test='inventory-item-desc']",  # 单商品描述
    "item_product_img": ".inventory_item_img img",  # 单商品图片
    "item_button": "button",  # Add to cart / Remove
    "product_sort_type": "[data-test='product-sort-container']",  # 商品排序方式
    "shopping_cart_badge": "[data-test='shopping-cart-badge']",  # 购物车角标
    "shopping_cart_link": "[data-test='shopping-cart-link']",  # 购物车icon
    "burger_menu": "#react-burger-menu-btn",
    "logout_link": "#logout_sidebar_link",
}

CART_LOCATORS = {
    "page_title": "[data-test='title']",
    "cart_item": ".cart_item",  # 购物车商品行
    "item_product_name": ".inventory_item_name",
    "item_product_price": ".inventory_item_price",
    "item_product_desc": ".inventory_item_desc",
    "item_quantity": ".cart_quantity",
    "item_button": "button",
    "remove_product_button": "button[id^='remove']",  # Remove 按钮
    "continue": "[data-test='continue-shopping']",  # 继续购物按钮
    "checkout_button": "[data-test='checkout']",  # 结算按钮
    "shopping_cart_badge": "[data-test='shopping-cart-badge']",
}

CHECKOUT_LOCATORS = {
    # --------checkout-step-one.html---------
    "page_title": "[data-test='title']",
    "firstName_input": "[data-test='firstName']",  # firstName输入框
    "lastName_input": "[data-test='lastName']",  # lastName输入框
    "postalCode_input": "[data-test='postalCode']",  # postalCode输入框
    "container_error_msg": "[data-test='error']",  # Error: First Name is required
    "error_button": "[data-test='error-button']",
    "step_one_cancel_button": "[data-test='cancel']",  # 取消按钮
    "continue_button": "[data-test='continue']",  # 继续按钮

    # --------checkout-step-two.html---------
    "item_list": ".cart_item",  # 订单确认页面商品列表
    "item_product_name": ".inventory_item_name",
    "item_product_price": ".inventory_item_price",
    "item_quantity": ".cart_quantity",
    "payment_information": "[data-test='payment-info-value']",  # 支付信息value
    "shipping_information": "[data-test='shipping-info-value']",  # 运费信息value
    "products_price": "[data-test='subtotal-label']",  # Item total: $29.99
    "tax_price": "[data-test='tax-label']",  # Tax: $2.40
    "order_price": "[data-test='total-label']",  # Total: $32.39
    "step_two_cancel_button": "[data-test='cancel']",
    "finish_button": "[data-test='finish']",  # 完成按钮
}

CHECKOUT_COMPLETE_LOCATORS = {
    "page_title": "[data-test='title']",
    "complete_header": "[data-test='complete-header']",  # Thank you for your order!
    "complete_text": "[data-test='complete-text']",
    "back_home_button": "[data-test='back-to-products']",
    "pony_express_image": ".pony_express",
}
