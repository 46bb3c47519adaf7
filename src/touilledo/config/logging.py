"""Route touilledo's stdlib log records through structlog's formatter.

Modules log with ``logging.getLogger(__name__)``; this installs one stderr
handler whose :class:`structlog.stdlib.ProcessorFormatter` renders those
records either for a console or as JSON lines (``--log-json``). stdout is
left to the list itself.
"""

from __future__ import annotations

import logging
import sys

import structlog


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Install the stderr handler and set levels.

    Args:
        verbose: Show touilledo's DEBUG records (load/save events).
        log_json: Render records as JSON lines instead of console text.
    """
    pre_chain: list[structlog.types.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.WARNING)

    logging.getLogger("touilledo").setLevel(logging.DEBUG if verbose else logging.WARNING)
    # redis-py logs connection chatter at DEBUG.
    logging.getLogger("redis").setLevel(logging.WARNING)
