from __future__ import annotations

"""
Logging Lifecycle.

Installs a single QueueHandler on the root logger and drains it on a
QueueListener thread into the sinks from `handlers.build_sinks`. Setup is
idempotent; `force=True` tears the previous listener down first.
"""

import atexit
import logging
import queue
from logging.handlers import QueueHandler, QueueListener

from structural_patterns.infra.logging.config import LoggingConfig
from structural_patterns.infra.logging.handlers import build_sinks, is_marked, mark

_CONFIGURED_FLAG_ATTR: str = "_structural_patterns_configured"
_QUEUE_LISTENER_ATTR: str = "_structural_patterns_queue_listener"


# ==============================================================================
# PUBLIC API
# ==============================================================================

def configure_logging(cfg: LoggingConfig, *, force: bool = False) -> logging.Logger:
    """
    Route root logger output through a queue listener.

    Args:
        cfg: Diagnostics settings.
        force: Replace an existing setup instead of keeping it.

    Returns:
        logging.Logger: The root logger.
    """
    root = logging.getLogger()

    if getattr(root, _CONFIGURED_FLAG_ATTR, False) and not force:
        return root

    _detach(root)
    root.setLevel(cfg.numeric_level)

    sinks = build_sinks(cfg)
    if sinks:
        records: queue.Queue[logging.LogRecord] = queue.Queue()
        listener = QueueListener(records, *sinks, respect_handler_level=True)
        listener.start()
        root.addHandler(mark(QueueHandler(records)))
        setattr(root, _QUEUE_LISTENER_ATTR, listener)
        atexit.register(_stop, listener)

    setattr(root, _CONFIGURED_FLAG_ATTR, True)
    return root


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _detach(root: logging.Logger) -> None:
    """Remove this package's handlers and flush the running listener, if any."""
    for h in list(root.handlers):
        if is_marked(h):
            root.removeHandler(h)
            h.close()

    listener = getattr(root, _QUEUE_LISTENER_ATTR, None)
    if listener is not None:
        _stop(listener)
        for h in listener.handlers:
            h.close()
        setattr(root, _QUEUE_LISTENER_ATTR, None)


def _stop(listener: QueueListener) -> None:
    # stop() joins the worker thread; a listener already stopped has none
    if getattr(listener, "_thread", None) is not None:
        listener.stop()
