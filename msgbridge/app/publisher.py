# msgbridge/app/publisher.py
import redis

class PublishError(Exception):
    pass

class QueuePublisher:
    """
    Pushes message bytes onto a Redis list addressed by queue name.
    Fire-and-forget unless `confirm` is set, in which case the LPUSH reply
    (the new list length) must be positive.
    """
    def __init__(self, client, confirm=False):
        self.client = client
        self.confirm = confirm

    @classmethod
    def from_url(cls, url, confirm=False):
        return cls(redis.from_url(url, decode_responses=False), confirm=confirm)

    def publish(self, queue_name, body):
        reply = self.client.lpush(queue_name, body)
        if self.confirm and (not isinstance(reply, int) or reply < 1):
            raise PublishError(f"broker did not acknowledge push to {queue_name} (reply={reply!r})")
        return reply

    def close(self):
        self.client.close()
