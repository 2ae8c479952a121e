"""
Request tracing context.
"""

import contextvars

# Context variable holding the trace ID of the current update
trace_id_var = contextvars.ContextVar("trace_id", default=None)


def get_trace_id() -> str:
    """
    Get the trace ID of the current update.
    """
    return trace_id_var.get()


def set_trace_id(trace_id: str) -> None:
    """
    Set the trace ID of the current update.
    """
    trace_id_var.set(trace_id)
