import pytest

from msgbridge.app.config import Settings

class FakeRedis:
    """In-memory stand-in for the few list commands the bridge uses."""
    def __init__(self, lpush_reply=None, fail_on=None):
        self.lists = {}
        self.lpush_reply = lpush_reply
        self.fail_on = fail_on or set()
        self.closed = False

    def lpush(self, name, value):
        if name in self.fail_on:
            raise ConnectionError(f"cannot reach broker for {name}")
        self.lists.setdefault(name, []).insert(0, value)
        if self.lpush_reply is not None:
            return self.lpush_reply
        return len(self.lists[name])

    def lrange(self, name, start, end):
        items = self.lists.get(name, [])
        n = len(items)
        start = start + n if start < 0 else start
        end = end + n if end < 0 else end
        return items[max(start, 0):end + 1]

    def llen(self, name):
        return len(self.lists.get(name, []))

    def close(self):
        self.closed = True

class FakeResponse:
    def __init__(self, status_code, content=b""):
        self.status_code = status_code
        self.content = content

    @property
    def text(self):
        return self.content.decode("utf-8")

class FakeSession:
    """Records each multipart POST; replies via `responder(file_name, data)`."""
    def __init__(self, responder=None):
        self.responder = responder or (lambda name, data: FakeResponse(200, b'{"ok": true}'))
        self.calls = []
        self.closed = False

    def post(self, url, files=None, timeout=None):
        field, (name, fh) = next(iter(files.items()))
        data = fh.read()
        self.calls.append({"url": url, "field": field, "name": name, "data": data, "timeout": timeout})
        return self.responder(name, data)

    def close(self):
        self.closed = True

@pytest.fixture
def folders(tmp_path):
    src = tmp_path / "in"
    dest = tmp_path / "out"
    src.mkdir()
    return src, dest

@pytest.fixture
def settings(folders):
    src, dest = folders
    return Settings(
        source_folder=str(src),
        destination_folder=str(dest),
        web_service_url="http://convert.test/api",
        http_timeout=5.0,
        queue_name="test:queue",
        source_system="DSP",
        destination_address="store-0042",
        render_technology="PDF",
    )

@pytest.fixture
def fake_redis():
    return FakeRedis()
