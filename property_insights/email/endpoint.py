"""Server side of the ``POST {type, data}`` send-email contract."""

import json
import logging
from typing import Any

from property_insights.email.dispatcher import EmailDispatcher
from property_insights.email.messages import message_from_payload
from property_insights.exceptions import ValidationError

logger = logging.getLogger(__name__)


async def handle_send_email(body: str | bytes | dict[str, Any], dispatcher: EmailDispatcher) -> tuple[int, dict[str, Any]]:
    """Handle one send-email request.

    Parameters
    ----------
    body : str | bytes | dict
        Raw JSON request body or an already-parsed object.
    dispatcher : EmailDispatcher
        Provider that performs the send.

    Returns
    -------
    tuple[int, dict]
        HTTP status code and JSON response body.
    """
    if isinstance(body, (str, bytes)):
        try:
            body = json.loads(body)
        except json.JSONDecodeError:
            return 400, {"message": "Invalid request body"}

    try:
        message = message_from_payload(body)
    except ValidationError as exc:
        if "type" in exc.errors:
            return 400, {"message": "Invalid email type"}
        return 400, {"message": "Invalid email data", "errors": exc.errors}

    try:
        result = await dispatcher.send(message)
    except ValidationError as exc:
        return 400, {"message": "Invalid email data", "errors": exc.errors}
    if not result.success:
        logger.warning("send-email request failed with status %s", result.status_code)
        return result.status_code, {"message": result.message}

    return 200, {
        "success": True,
        "message": result.message,
        "messageId": result.message_id,
    }
