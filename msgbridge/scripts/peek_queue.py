# msgbridge/scripts/peek_queue.py
# Show queued envelopes without consuming them (oldest first).
import json, sys
import redis, orjson

from msgbridge.app.config import load_settings

def peek(client, queue_name, limit=10):
    # LPUSH adds at the head, consumers BRPOP from the tail
    items = client.lrange(queue_name, -limit, -1)
    out = []
    for b in reversed(items):
        try:
            out.append(orjson.loads(b))
        except orjson.JSONDecodeError:
            out.append({"raw": b.decode() if isinstance(b, (bytes, bytearray)) else str(b)})
    return out

if __name__ == "__main__":
    settings = load_settings()
    limit = int(sys.argv[1]) if len(sys.argv) > 1 else 10
    r = redis.from_url(settings.redis_url, decode_responses=False)
    print("Queue length:", r.llen(settings.queue_name))
    print(json.dumps(peek(r, settings.queue_name, limit), indent=2, default=str))
