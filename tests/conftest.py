import pytest

from helpers import SECRET, stepping_clock
from skinvend_sdk import ClientConfig, HmacSha512Signer


@pytest.fixture
def config():
    return ClientConfig(
        api_key="key-123",
        secret_key=SECRET,
        base_url="https://skinvend.example/",
        result_url="https://shop.example/result",
        fail_url="https://shop.example/fail",
        success_url="https://shop.example/success",
    )


@pytest.fixture
def signer():
    return HmacSha512Signer(SECRET, clock=stepping_clock())
