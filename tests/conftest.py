import pytest

from twitter_media import Config


@pytest.fixture
def strict_config() -> Config:
    return Config(validate=True)


@pytest.fixture
def lenient_config() -> Config:
    return Config(validate=False)


@pytest.fixture
def raw_tweet() -> dict:
    return {
        "id": 1,
        "id_str": "1",
        "text": "hello https://t.co/abc123",
        "entities": {
            "media": [
                {
                    "id": 10,
                    "id_str": "10",
                    "media_url": "https://pbs.twimg.com/media/x.jpg",
                    "media_url_https": "https://pbs.twimg.com/media/x.jpg",
                    "url": "https://t.co/abc123",
                    "type": "photo"
                }
            ]
        }
    }
