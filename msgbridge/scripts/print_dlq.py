# msgbridge/scripts/print_dlq.py
import json
import redis, orjson

from msgbridge.app.config import load_settings

def print_dlq(client, dlq_name):
    n = client.llen(dlq_name)
    print("DLQ length:", n)
    items = client.lrange(dlq_name, 0, -1)
    if not items:
        print("DLQ empty.")
        return
    for i, it in enumerate(items):
        try:
            parsed = orjson.loads(it)
            print(f"--- DLQ item {i} ---")
            print(json.dumps(parsed, indent=2, default=str))
        except Exception:
            print("--- DLQ item raw ---")
            print(it)

if __name__ == "__main__":
    settings = load_settings()
    if not settings.dlq_name:
        print("DLQ_NAME is not set")
    else:
        print_dlq(redis.from_url(settings.redis_url, decode_responses=True), settings.dlq_name)
