# msgbridge/app/envelope.py
import orjson

from .files import strip_suffix

CONTENT_TYPE = "application/json"

def base_identifier(name, suffix):
    return strip_suffix(name, suffix)

def build_envelope(base_name, content, settings):
    """
    Wrap file content in the message envelope.
    formatUrl is only present when configured.
    """
    envelope = {
        "sourceSystem": settings.source_system,
        "destinationAddress": settings.destination_address,
        "messageId": "msg-" + base_name,
        "correlationId": "corr-" + base_name,
        "messageRenderTechnology": settings.render_technology,
    }
    if settings.format_url:
        envelope["formatUrl"] = settings.format_url
    envelope["payload"] = content
    return envelope

def dumps_envelope(envelope):
    # orjson always emits UTF-8 bytes
    return orjson.dumps(envelope)
