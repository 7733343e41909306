import pytest
from unittest.mock import patch

from msgbridge.app.publisher import QueuePublisher, PublishError
from conftest import FakeRedis

def test_publish_pushes_to_named_list(fake_redis):
    pub = QueuePublisher(fake_redis)
    assert pub.publish("q1", b"{}") == 1
    assert fake_redis.lists == {"q1": [b"{}"]}

def test_fire_and_forget_ignores_reply():
    pub = QueuePublisher(FakeRedis(lpush_reply=0))
    assert pub.publish("q", b"x") == 0

def test_confirm_rejects_non_positive_reply():
    pub = QueuePublisher(FakeRedis(lpush_reply=0), confirm=True)
    with pytest.raises(PublishError):
        pub.publish("q", b"x")

def test_broker_errors_propagate():
    pub = QueuePublisher(FakeRedis(fail_on={"q"}))
    with pytest.raises(ConnectionError):
        pub.publish("q", b"x")

def test_from_url_builds_bytes_client():
    with patch("msgbridge.app.publisher.redis.from_url") as from_url:
        pub = QueuePublisher.from_url("redis://broker:6379/2", confirm=True)
    from_url.assert_called_once_with("redis://broker:6379/2", decode_responses=False)
    assert pub.client is from_url.return_value
    assert pub.confirm is True
