import json

from fastapi import Request


async def read_payload(request: Request) -> dict:
    """Read a urlencoded/multipart form or a JSON object body.

    JSON values keep their types so callers can reject non-string fields.
    Anything unparseable yields an empty payload.
    """
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/json"):
        try:
            data = await request.json()
        except (json.JSONDecodeError, UnicodeDecodeError):
            return {}
        return data if isinstance(data, dict) else {}

    form = await request.form()
    return {key: form.get(key) for key in form.keys()}
