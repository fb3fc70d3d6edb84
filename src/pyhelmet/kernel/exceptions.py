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
"""PyHelmet exception hierarchy.

Every error raised by the library derives from :class:`PyHelmetException`.
Errors are only raised while a policy set is being configured or attached;
request processing never raises on its own.
"""

from __future__ import annotations

# =============================================================================
# Base Exception
# =============================================================================


class PyHelmetException(Exception):
    """Base exception for all PyHelmet errors.

    Carries an optional error code and context dict for structured error data.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "HEADER_001").
        context: Arbitrary key-value pairs for error context and debugging.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.context: dict = context if context is not None else {}


# =============================================================================
# Configuration Exceptions
# =============================================================================


class ConfigurationException(PyHelmetException):
    """The policy set or its configuration source is invalid."""


class InvalidHeaderException(ConfigurationException):
    """A rendered header name or value is not a valid HTTP field component."""

    def __init__(self, message: str, name: str, value: str) -> None:
        super().__init__(message, code="INVALID_HEADER", context={"name": name, "value": value})
        self.name = name
        self.value = value
