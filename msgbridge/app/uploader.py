# msgbridge/app/uploader.py
import os
import requests

from .files import list_tasks, output_name
from .dlq import send_to_dlq

INPUT_SUFFIX = ".txt"
OUTPUT_SUFFIX = ".json"

def post_file(session, url, task, timeout=None):
    """POST one file as multipart/form-data under the `file` field."""
    with open(task.path, "rb") as fh:
        return session.post(url, files={"file": (task.name, fh)}, timeout=timeout)

def write_output(dest_dir, name, body):
    """Write the response body verbatim, replacing any existing file."""
    dest_file = os.path.join(dest_dir, output_name(name, INPUT_SUFFIX, OUTPUT_SUFFIX))
    with open(dest_file, "wb") as fh:
        fh.write(body)
    return os.path.abspath(dest_file)

def upload_file(session, settings, task, dest_dir):
    """
    Send one file and persist the reply.
    Returns (ok, reason); reason is None on success.
    """
    print(f"Processing file: {task.name}")
    try:
        response = post_file(session, settings.web_service_url, task, timeout=settings.http_timeout)
    except requests.RequestException as e:
        # RequestException subclasses OSError, keep it first
        print(f"Failed to process file: {task.name}, error: {e}")
        return False, f"transport_error:{e}"
    except OSError as e:
        print(f"Error reading file: {task.path} ({e})")
        return False, f"read_error:{e}"

    if not 200 <= response.status_code < 300:
        print(f"Failed to process file: {task.name}, Status code: {response.status_code}")
        return False, f"http_status:{response.status_code}"

    print(f"File processed successfully: {task.name}")
    try:
        dest_file = write_output(dest_dir, task.name, response.content)
    except OSError as e:
        print(f"Error writing to file: {os.path.join(dest_dir, output_name(task.name))} ({e})")
        return False, f"write_error:{e}"
    print(f"Output written to: {dest_file}")
    return True, None

def upload_files(settings, session, dlq_client=None):
    """
    Upload every .txt file of the source folder and save each 2xx reply as
    <base>.json in the destination folder. Listing errors propagate.
    """
    dest_dir = settings.destination_folder
    os.makedirs(dest_dir, exist_ok=True)

    summary = {"processed": 0, "ok": 0, "failed": 0}
    for task in list_tasks(settings.source_folder, INPUT_SUFFIX):
        summary["processed"] += 1
        ok, reason = upload_file(session, settings, task, dest_dir)
        if ok:
            summary["ok"] += 1
            continue
        summary["failed"] += 1
        send_to_dlq(dlq_client, settings.dlq_name, {"mode": "upload", "file": task.path}, reason=reason)
    return summary
