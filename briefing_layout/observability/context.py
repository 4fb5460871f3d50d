"""
Run ids for layout passes.

Every engine entry point runs inside a LayoutContext, so the exclusion,
forced-placement and summary records of one pass share an id. A pass that
starts while a run id is already bound joins that run instead of minting
its own, which lets a host tag a whole re-render with one id.
"""

import contextvars
import uuid

_run_id_var: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "layout_run_id", default=None
)


def get_run_id() -> str | None:
    """Run id bound in the current context, if any."""
    return _run_id_var.get()


def generate_run_id() -> str:
    return f"lay-{uuid.uuid4().hex[:16]}"


def log_fields(**fields) -> dict:
    """`extra` mapping for an engine log record, stamped with the current run id."""
    return {"run_id": get_run_id(), **fields}


class LayoutContext:
    """
    Bind a run id for the duration of a block.

    Usage:
        with LayoutContext() as ctx:
            layout_day(events)
            detect_conflicts(events)
            # both passes log under ctx.run_id

        # Tag engine logs with the host's own correlation id:
        with LayoutContext(run_id="req-abc123"):
            ...

    With no explicit id the context joins the enclosing run, or starts a
    fresh one when nothing is bound.
    """

    def __init__(self, run_id: str | None = None):
        self.run_id = run_id
        self._token: contextvars.Token | None = None

    def __enter__(self) -> "LayoutContext":
        if self.run_id is None:
            self.run_id = get_run_id() or generate_run_id()
        self._token = _run_id_var.set(self.run_id)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        if self._token is not None:
            _run_id_var.reset(self._token)
            self._token = None
