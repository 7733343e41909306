import orjson

from msgbridge.app.dlq import send_to_dlq
from conftest import FakeRedis

def test_disabled_without_name(fake_redis):
    assert send_to_dlq(fake_redis, "", {"file": "a"}) is False
    assert send_to_dlq(None, "dlq", {"file": "a"}) is False
    assert fake_redis.lists == {}

def test_pushes_reason_and_timestamp(fake_redis):
    assert send_to_dlq(fake_redis, "dlq", {"file": "a"}, reason="http_status:500") is True
    item = orjson.loads(fake_redis.lists["dlq"][0])
    assert item["payload"] == {"file": "a"}
    assert item["reason"] == "http_status:500"
    assert "timestamp" in item

def test_push_failure_is_swallowed(capsys):
    assert send_to_dlq(FakeRedis(fail_on={"dlq"}), "dlq", {"file": "a"}) is False
    assert "DLQ push failed" in capsys.readouterr().out
