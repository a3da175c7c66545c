"""login功能测试用例：测试数据、登录错误提示信息
测试正常登录流程（standard / problem / performance_glitch）
锁定用户
用户名错误
密码错误
用户名为空
密码为空
用户名和密码都为空
"""
from types import MappingProxyType

from data.models import Credentials, LoginCase

PASSWORD = "secret_sauce"

USERS = MappingProxyType({
    "standard": Credentials("standard_user", PASSWORD),
    "locked": Credentials("locked_out_user", PASSWORD),
    "problem": Credentials("problem_user", PASSWORD),
    "performance": Credentials("performance_glitch_user", PASSWORD),
    "visual": Credentials("visual_user", PASSWORD),
    "error": Credentials("error_user", PASSWORD),
})

LOCKED_OUT_ERROR_MSG = "Sorry, this user has been locked out"

INVALID_LOGINS = MappingProxyType({
    "wrong_username": LoginCase("invalid_user", PASSWORD, "Username and password do not match"),
    "wrong_password": LoginCase("standard_user", "wrong_password", "Username and password do not match"),
    "empty_username": LoginCase("", PASSWORD, "Username is required"),
    "empty_password": LoginCase("standard_user", "", "Password is required"),
    "both_empty": LoginCase("", "", "Username is required"),
})

LOGIN_SUCCESS_URL = "/inventory.html"

SAVE_LOGIN_STATE_PATH = "storage"
SAVE_LOGIN_STATE_FILE = "storage/login.json"
