"""Log output for tminus.

Modules log through ``logging.getLogger(__name__)`` and never call structlog
themselves. :func:`configure_logging` gives the ``tminus`` logger a single
handler whose formatter is a structlog ``ProcessorFormatter``, so those
records come out as console lines or, with ``--log-json``, as one JSON
object per line. Keys passed through ``extra=`` become fields.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import structlog

PACKAGE_LOGGER = "tminus"

_PRE_CHAIN: list[structlog.types.Processor] = [
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.ExtraAdder(),
    structlog.processors.TimeStamper(fmt="iso"),
]


def _formatter(*, log_json: bool, stream: TextIO) -> logging.Formatter:
    processors: list[structlog.types.Processor] = [
        structlog.stdlib.ProcessorFormatter.remove_processors_meta,
    ]
    if log_json:
        processors += [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=stream.isatty()))
    return structlog.stdlib.ProcessorFormatter(foreign_pre_chain=_PRE_CHAIN, processors=processors)


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    stream: TextIO | None = None,
) -> None:
    """(Re)install the ``tminus`` log handler.

    Args:
        verbose: Emit DEBUG records; otherwise WARNING and above.
        log_json: JSON lines instead of console lines.
        stream: Destination (default: ``sys.stderr``, keeping stdout for
            URLs and results).
    """
    out = stream if stream is not None else sys.stderr
    handler = logging.StreamHandler(out)
    handler.setFormatter(_formatter(log_json=log_json, stream=out))

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False
