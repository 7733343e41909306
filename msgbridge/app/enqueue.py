# msgbridge/app/enqueue.py
from .files import list_tasks, read_text
from .envelope import CONTENT_TYPE, build_envelope, dumps_envelope
from .dlq import send_to_dlq

def enqueue_file(publisher, settings, task):
    """
    Read, wrap and publish one file. Returns (ok, reason).
    """
    try:
        content = read_text(task)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error reading file: {task.path} ({e})")
        return False, f"read_error:{e}"

    try:
        envelope = build_envelope(task.base_name, content, settings)
        publisher.publish(settings.queue_name, dumps_envelope(envelope))
    except Exception as e:
        print(f"Error enqueuing message: {e}")
        return False, f"publish_error:{e}"

    print(f"Enqueued message: {task.name} ({CONTENT_TYPE})")
    return True, None

def enqueue_files(settings, publisher, folder=None, suffix=None):
    """
    Publish one envelope per file matching `suffix` in `folder`
    (defaults: destination folder and the configured suffix).
    Listing errors propagate.
    """
    folder = folder or settings.destination_folder
    suffix = suffix or settings.file_suffix

    summary = {"processed": 0, "ok": 0, "failed": 0}
    for task in list_tasks(folder, suffix):
        summary["processed"] += 1
        ok, reason = enqueue_file(publisher, settings, task)
        if ok:
            summary["ok"] += 1
            continue
        summary["failed"] += 1
        send_to_dlq(publisher.client, settings.dlq_name, {"mode": "enqueue", "file": task.path}, reason=reason)
    return summary
