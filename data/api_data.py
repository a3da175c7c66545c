from types import MappingProxyType

JSONPLACEHOLDER_BASE_URL = "https://jsonplaceholder.typicode.com"
FAKESTORE_BASE_URL = "https://fakestoreapi.com"

FAKESTORE_CREDENTIALS = MappingProxyType({"username": "mor_2314", "password": "83r5^_"})

POST_KEYS = ("userId", "id", "title", "body")
COMMENT_KEYS = ("postId", "id", "name", "email", "body")
JSONPLACEHOLDER_USER_KEYS = ("id", "name", "username", "email", "address", "phone", "website", "company")
JSONPLACEHOLDER_POST_COUNT = 100
JSONPLACEHOLDER_USER_COUNT = 10
JSONPLACEHOLDER_NEXT_POST_ID = 101

PRODUCT_KEYS = ("id", "title", "price", "description", "category", "image", "rating")
CART_KEYS = ("id", "userId", "date", "products")
FAKESTORE_USER_KEYS = ("id", "email", "username", "name", "address", "phone")
EXPECTED_CATEGORIES = ("electronics", "jewelery")

JWT_PATTERN = r"^[A-Za-z0-9_-]+\.[A-Za-z0-9_-]+\.[A-Za-z0-9_-]+$"
MAX_RESPONSE_TIME_MS = 3000
