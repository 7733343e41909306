# msgbridge/app/config.py
from dataclasses import dataclass
from typing import Mapping, Optional
import os

DEFAULT_SOURCE_FOLDER = "./input"
DEFAULT_DESTINATION_FOLDER = "./output"
DEFAULT_WEB_SERVICE_URL = "http://localhost:8000/convert"
DEFAULT_REDIS_URL = "redis://localhost:6379/0"
DEFAULT_QUEUE_NAME = "msgbridge:queue"
DEFAULT_FILE_SUFFIX = ".json"

_TRUE = ("1", "true", "yes", "on")

@dataclass(frozen=True)
class Settings:
    source_folder: str = DEFAULT_SOURCE_FOLDER
    destination_folder: str = DEFAULT_DESTINATION_FOLDER
    web_service_url: str = DEFAULT_WEB_SERVICE_URL
    http_timeout: float = 30.0
    redis_url: str = DEFAULT_REDIS_URL
    queue_name: str = DEFAULT_QUEUE_NAME
    source_system: str = ""
    destination_address: str = ""
    render_technology: str = ""
    format_url: Optional[str] = None
    upload_source_folder: Optional[str] = None
    file_suffix: str = DEFAULT_FILE_SUFFIX
    publish_confirm: bool = False
    dlq_name: str = ""

    @property
    def enqueue_files_folder(self):
        return self.upload_source_folder or self.source_folder

def normalize_suffix(suffix):
    suffix = (suffix or "").strip()
    if not suffix:
        return DEFAULT_FILE_SUFFIX
    return suffix if suffix.startswith(".") else "." + suffix

def _optional(value):
    if value is None:
        return None
    value = value.strip()
    return value or None

def _positive_float(value, name):
    number = float(value)
    if number <= 0:
        raise ValueError(f"{name} must be greater than 0, got {value!r}")
    return number

def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Read settings once from the environment (or from `env` when given).
    Raises ValueError on a non-numeric or non-positive HTTP_TIMEOUT.
    """
    env = os.environ if env is None else env
    return Settings(
        source_folder=env.get("SOURCE_FOLDER", DEFAULT_SOURCE_FOLDER),
        destination_folder=env.get("DESTINATION_FOLDER", DEFAULT_DESTINATION_FOLDER),
        web_service_url=env.get("WEB_SERVICE_URL", DEFAULT_WEB_SERVICE_URL),
        http_timeout=_positive_float(env.get("HTTP_TIMEOUT", "30"), "HTTP_TIMEOUT"),
        redis_url=env.get("REDIS_URL", DEFAULT_REDIS_URL),
        queue_name=env.get("QUEUE_NAME", DEFAULT_QUEUE_NAME),
        source_system=env.get("METADATA_SOURCE_SYSTEM", ""),
        destination_address=env.get("METADATA_DESTINATION_ADDRESS", ""),
        render_technology=env.get("METADATA_RENDER_TECHNOLOGY", ""),
        format_url=_optional(env.get("METADATA_FORMAT_URL")),
        upload_source_folder=_optional(env.get("UPLOAD_SOURCE_FOLDER")),
        file_suffix=normalize_suffix(env.get("FILE_SUFFIX", DEFAULT_FILE_SUFFIX)),
        publish_confirm=env.get("PUBLISH_CONFIRM", "false").strip().lower() in _TRUE,
        dlq_name=env.get("DLQ_NAME", "").strip(),
    )
