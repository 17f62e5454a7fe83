# tests/conftest.py
import pytest
from dotenv import load_dotenv

from locapi.config import ApiSettings, get_settings

# Load environment variables from .env file if it exists
load_dotenv()


@pytest.fixture
def settings() -> ApiSettings:
    """Settings with library defaults, ignoring the environment and .env files."""
    return ApiSettings(_env_file=None, base_url="https://www.loc.gov")


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """get_settings() is cached; start and end every test with a fresh read."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
