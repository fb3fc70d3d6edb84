# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""StructlogAdapter — routes pyhelmet's log events through structlog."""

from __future__ import annotations

import logging
import sys
from typing import Any, TextIO

import structlog

from pyhelmet.core.config import Config
from pyhelmet.kernel.exceptions import ConfigurationException

NAMESPACE = "pyhelmet"

_FORMATS = ("console", "json")


class _NamespaceHandler(logging.StreamHandler):  # type: ignore[type-arg]
    """Marks the handler installed on the namespace logger so it can be replaced."""


class StructlogAdapter:
    """Logging adapter backed by structlog, scoped to the ``pyhelmet`` namespace.

    Reads ``pyhelmet.logging.format`` (``console`` or ``json``) and
    ``pyhelmet.logging.level``: ``root`` sets the level of the whole
    namespace, any other key is an area (``helmet``, ``web``, ``config``)
    and sets the level of ``pyhelmet.<area>``::

        pyhelmet:
          logging:
            format: json
            level:
              root: INFO
              web: DEBUG

    A handler is attached to the ``pyhelmet`` stdlib logger, which stops
    propagating to the root logger. If the host application has already
    configured structlog, its processor chain is kept and only the handler
    and levels are applied.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream if stream is not None else sys.stderr

    def configure(self, config: Config) -> None:
        section = config.get_section(f"{NAMESPACE}.logging")
        log_format = str(section.get("format", "console")).lower()
        if log_format not in _FORMATS:
            raise ConfigurationException(
                f"Unknown log format {log_format!r}, expected one of {', '.join(_FORMATS)}",
                context={"format": log_format},
            )

        levels = dict(section.get("level") or {})
        root_level = _parse_level(levels.pop("root", "INFO"))
        area_levels = {f"{NAMESPACE}.{area}": _parse_level(level) for area, level in levels.items()}

        if not structlog.is_configured():
            self._setup_structlog(log_format)

        namespace_logger = logging.getLogger(NAMESPACE)
        for handler in list(namespace_logger.handlers):
            if isinstance(handler, _NamespaceHandler):
                namespace_logger.removeHandler(handler)
        handler = _NamespaceHandler(self._stream)
        handler.setFormatter(logging.Formatter("%(message)s"))
        namespace_logger.addHandler(handler)
        namespace_logger.propagate = False
        namespace_logger.setLevel(root_level)

        for name, level in area_levels.items():
            logging.getLogger(name).setLevel(level)

    def get_logger(self, area: str) -> Any:
        """Get the structlog logger for ``pyhelmet.<area>``."""
        return structlog.get_logger(f"{NAMESPACE}.{area}")

    @staticmethod
    def _setup_structlog(log_format: str) -> None:
        processors: list[structlog.types.Processor] = [
            structlog.stdlib.filter_by_level,
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.UnicodeDecoder(),
        ]

        if log_format == "json":
            processors.append(structlog.processors.JSONRenderer())
        else:
            processors.append(structlog.dev.ConsoleRenderer(colors=False))

        # Module-level loggers are created at import time, before configure()
        structlog.configure(
            processors=processors,
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=False,
        )


def _parse_level(level: Any) -> int:
    name = str(level).upper()
    value = logging.getLevelName(name)
    if not isinstance(value, int):
        raise ConfigurationException(f"Unknown log level {level!r}", context={"level": level})
    return value
