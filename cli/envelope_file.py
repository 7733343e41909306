# cli/envelope_file.py

import os, sys

from msgbridge.app.config import load_settings
from msgbridge.app.files import FileTask, read_text
from msgbridge.app.envelope import base_identifier, build_envelope, dumps_envelope

def make_envelope_from_file(path, settings=None):
    settings = settings or load_settings()
    name = os.path.basename(path)
    task = FileTask(path=os.path.abspath(path), name=name, base_name=base_identifier(name, settings.file_suffix))
    return dumps_envelope(build_envelope(task.base_name, read_text(task), settings)).decode("utf-8")

if __name__ == "__main__":
    if len(sys.argv) < 2:
        print("usage: python cli/envelope_file.py path")
        sys.exit(2)
    print(make_envelope_from_file(sys.argv[1]))
