# tests/helpers.py
from gym_api.core.config import Settings


TEST_USERNAME = "testUser"
TEST_PASSWORD = "testPass"

test_settings = Settings(
    _env_file=None,
    DATABASE_URL="sqlite://",
    JWT_KEY="test-signing-key-for-gym-api",
    LOGIN_USERNAME=TEST_USERNAME,
    LOGIN_PASSWORD=TEST_PASSWORD,
)


def auth_header(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


def login_and_get_token(client) -> str:
    res = client.post("/api/auth/login", json={"username": TEST_USERNAME, "password": TEST_PASSWORD})
    assert res.status_code == 200, res.text
    token = res.json()["token"]
    assert token
    return token


def ids(items: list[dict], key: str) -> set[int]:
    return {item[key] for item in items}
