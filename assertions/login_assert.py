class LoginAssert:

    @staticmethod
    def error_message(actual_msg: str, expect_msg: str):
        assert expect_msg in actual_msg, f"登录错误期望提示信息：{expect_msg}，登录错误实际提示信息：{actual_msg}"

    @staticmethod
    def field_value(field: str, actual: str, expect: str):
        assert actual == expect, f"{field}输入框值：{actual!r}!={expect!r}"

    @staticmethod
    def landed_on(url: str, fragment: str):
        assert fragment in url, f"登录后页面{url}不包含{fragment}"
