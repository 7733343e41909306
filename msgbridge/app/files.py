# msgbridge/app/files.py
from dataclasses import dataclass
import os

@dataclass(frozen=True)
class FileTask:
    path: str
    name: str
    base_name: str

def strip_suffix(name, suffix):
    if suffix and name.endswith(suffix):
        return name[: -len(suffix)]
    return name

def list_tasks(folder, suffix):
    """
    Flat listing of regular files in `folder` ending with `suffix`.
    A missing or unreadable folder raises (FileNotFoundError, NotADirectoryError,
    PermissionError); callers treat that as fatal.
    """
    root = os.path.abspath(folder)
    tasks = []
    for name in os.listdir(root):
        if not name.endswith(suffix):
            continue
        path = os.path.join(root, name)
        if not os.path.isfile(path):
            continue
        tasks.append(FileTask(path=path, name=name, base_name=strip_suffix(name, suffix)))
    return tasks

def read_text(task):
    with open(task.path, "r", encoding="utf-8", newline="") as fh:
        return fh.read()

def output_name(name, old=".txt", new=".json"):
    # only a trailing suffix is replaced: "a.txt.txt" -> "a.txt.json"
    if name.endswith(old):
        return name[: -len(old)] + new
    return name
