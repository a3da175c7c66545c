import allure
import pytest

from assertions.login_assert import LoginAssert
from data.login_data import LOCKED_OUT_ERROR_MSG, LOGIN_SUCCESS_URL
from data.product_data import PRODUCT_COUNT, PRODUCTS_PAGE_TITLE
from pages.login_page import LoginPage
from pages.products_page import ProductsPage


@pytest.fixture(scope="function")
def login_page(page):
    login_page = LoginPage(page)
    login_page.open_login()
    return login_page


@pytest.fixture(scope="function")
def products_page(page):
    return ProductsPage(page)


@allure.feature("登录")
@pytest.mark.ui
class TestLogin:

    @allure.story("正常登录")
    @pytest.mark.smoke
    @pytest.mark.e2e
    def test_login_success(self, login_page, products_page, demo_data):
        """standard_user 登录后进入商品页，6 个商品"""
        login_page.login_as(demo_data.users["standard"])
        login_page.verify_login_success(LOGIN_SUCCESS_URL)
        assert products_page.get_page_title() == PRODUCTS_PAGE_TITLE
        assert products_page.get_product_count() == PRODUCT_COUNT

    @allure.story("正常登录")
    @pytest.mark.parametrize("user_key", ["performance", "problem"])
    def test_login_success_other_users(self, login_page, products_page, demo_data, user_key):
        login_page.login_as(demo_data.users[user_key])
        login_page.verify_login_success(LOGIN_SUCCESS_URL)
        assert products_page.is_on_products_page()

    @allure.story("登录失败")
    @pytest.mark.smoke
    def test_login_locked_out_user(self, login_page, demo_data):
        login_page.login_as(demo_data.users["locked"])
        login_page.verify_login_fail(LOCKED_OUT_ERROR_MSG)
        assert login_page.is_on_login_page()

    # 测试登录失败（场景参数化）
    @allure.story("登录失败")
    @pytest.mark.parametrize(
        "case_key", [
            "wrong_username",
            "wrong_password",
            "empty_username",
            "empty_password",
            "both_empty"
        ]
    )
    def test_login_fail(self, login_page, demo_data, case_key):
        data = demo_data.invalid_logins[case_key]
        login_page.login(data.username, data.password)
        login_page.verify_login_fail(data.error_msg)


@allure.feature("登录")
@pytest.mark.ui
class TestLoginPageElements:

    def test_login_page_elements_visible(self, login_page):
        login_page.wait_visible(login_page.username_input)
        assert login_page.is_visible(login_page.password_input)
        assert login_page.is_visible(login_page.login_button)
        assert login_page.is_login_button_enabled()

    def test_close_error_message(self, login_page):
        """关闭错误提示后提示消失"""
        login_page.login("invalid", "invalid")
        login_page.wait_visible(login_page.error_message)
        login_page.close_error_message()
        assert not login_page.is_error_message_visible()

    def test_clear_input_fields(self, login_page):
        login_page.fill_username("testuser")
        login_page.fill_password("testpass")
        LoginAssert.field_value("username", login_page.get_username_value(), "testuser")
        LoginAssert.field_value("password", login_page.get_password_value(), "testpass")

        login_page.clear_username()
        login_page.clear_password()
        LoginAssert.field_value("username", login_page.get_username_value(), "")
        LoginAssert.field_value("password", login_page.get_password_value(), "")

    def test_error_message_read_is_idempotent(self, login_page, demo_data):
        """纯读取方法连续调用结果一致"""
        login_page.login_as(demo_data.users["locked"])
        login_page.wait_visible(login_page.error_message)
        assert login_page.get_error_message() == login_page.get_error_message()


@allure.feature("登录")
@pytest.mark.ui
class TestLoginFlow:

    @allure.story("登录登出")
    @pytest.mark.e2e
    def test_login_and_logout(self, login_page, products_page, demo_data):
        login_page.login_as(demo_data.users["standard"])
        login_page.verify_login_success(LOGIN_SUCCESS_URL)

        products_page.logout()
        login_page.wait_visible(login_page.login_button)
        assert login_page.is_on_login_page()

    def test_redirect_to_products_after_login(self, login_page, products_page, demo_data):
        login_page.login_as(demo_data.users["standard"])
        login_page.verify_login_success(LOGIN_SUCCESS_URL)
        LoginAssert.landed_on(login_page.get_current_url(), "inventory.html")
        assert products_page.get_page_title() == PRODUCTS_PAGE_TITLE
