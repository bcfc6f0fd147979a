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
"""structlog setup driven by the ``localefly.logging`` section."""

from __future__ import annotations

import logging
import sys

import structlog

from localefly.core.config import Config

# Loggers emitting the cascade events (locale_detected, locale_source_missed,
# locale_fallback, invalid_locale_candidate).
DETECTION_LOGGERS = ("localefly.detector", "localefly.negotiation")

_TRUE = ("true", "1", "yes", "on")


def configure_logging(config: Config) -> dict[str, int]:
    """Configure structlog and stdlib levels from *config*.

    Keys under ``localefly.logging``:

    - ``level.root``: root level, ``INFO`` by default.
    - ``level.<logger>``: per-logger level, e.g. ``localefly.i18n: WARNING``.
    - ``format``: ``console`` (default) or ``json``.
    - ``trace-detection``: when true, the detection loggers are forced to
      ``DEBUG`` so every source visited by the cascade is logged.

    Returns the per-logger levels that were applied.
    """
    levels = {name: str(level) for name, level in config.get_section("localefly.logging.level").items()}
    root_level = _level(levels.pop("root", "INFO"))

    if str(config.get("localefly.logging.trace-detection", False)).lower() in _TRUE:
        levels.update(dict.fromkeys(DETECTION_LOGGERS, "DEBUG"))

    renderer: structlog.types.Processor
    if str(config.get("localefly.logging.format", "console")).lower() == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=root_level, force=True)

    applied = {name: _level(level) for name, level in levels.items()}
    for name, level in applied.items():
        logging.getLogger(name).setLevel(level)
    return applied


def _level(name: str) -> int:
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.INFO
