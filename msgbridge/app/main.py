# msgbridge/app/main.py
import sys
import requests

from .config import load_settings
from .uploader import upload_files
from .enqueue import enqueue_files
from .publisher import QueuePublisher

MODE_PREFIX = "--mode="
DEFAULT_MODE = "upload"

def get_mode_from_args(args):
    """First --mode=<value> wins; no validation of the value."""
    for arg in args:
        if arg.startswith(MODE_PREFIX):
            return arg[len(MODE_PREFIX):]
    return DEFAULT_MODE

def run(args, settings=None, session=None, publisher=None):
    """
    Run the pipeline picked by --mode. `enqueue` and `enqueueFiles` publish to
    the queue, anything else uploads. Clients not passed in are created here
    and closed when the run ends.
    """
    settings = settings or load_settings()
    mode = get_mode_from_args(args)
    print(f"Starting msgbridge in mode: {mode}")

    owns_publisher = publisher is None
    if mode.lower() in ("enqueue", "enqueuefiles"):
        if owns_publisher:
            publisher = QueuePublisher.from_url(settings.redis_url, confirm=settings.publish_confirm)
        try:
            if mode.lower() == "enqueuefiles":
                return enqueue_files(settings, publisher, folder=settings.enqueue_files_folder)
            return enqueue_files(settings, publisher)
        finally:
            if owns_publisher:
                publisher.close()

    owns_session = session is None
    if owns_session:
        session = requests.Session()
    if owns_publisher and settings.dlq_name:
        publisher = QueuePublisher.from_url(settings.redis_url)
    try:
        return upload_files(settings, session, dlq_client=publisher.client if publisher else None)
    finally:
        if owns_session:
            session.close()
        if owns_publisher and publisher is not None:
            publisher.close()

def main():
    run(sys.argv[1:])

if __name__ == "__main__":
    main()
