# msgbridge/app/dlq.py
import orjson
from datetime import datetime, timezone

def send_to_dlq(client, dlq_name, payload, reason="unknown"):
    """
    Record a failed file on the dead-letter list. No-op when no list is
    configured. Returns True when the item was pushed.
    """
    if not dlq_name or client is None:
        return False
    msg = {
        "payload": payload,
        "reason": reason,
        "timestamp": datetime.now(timezone.utc).isoformat()
    }
    try:
        client.lpush(dlq_name, orjson.dumps(msg))
        return True
    except Exception as e:
        print("DLQ push failed:", e)
        return False
