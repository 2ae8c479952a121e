import json
import logging
import time

from aiogram.dispatcher.middlewares.base import BaseMiddleware

from komparisi.trace_context import set_trace_id

logger = logging.getLogger(__name__)


class TracingLogMiddleware(BaseMiddleware):
    async def __call__(self, handler, event, data):
        # TRACE-{update_id or message_id}-{ms}
        event_id = getattr(event, "update_id", None) or getattr(event, "message_id", None)
        ms = int(time.time() * 1000)
        trace_id = f"TRACE-{event_id}-{ms}"
        set_trace_id(trace_id)

        user_text = getattr(event, "text", None) or getattr(event, "data", None)
        if getattr(event, "photo", None):
            user_text = "<photo>"
        elif getattr(event, "document", None):
            user_text = "<document>"

        log_entry = {"trace_id": trace_id, "data": {"user_text": user_text}}
        logger.info("User input: %s", json.dumps(log_entry, default=str, ensure_ascii=False))

        data["trace_id"] = trace_id
        return await handler(event, data)
