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
"""Tests for the pyhelmet exception hierarchy."""

from pyhelmet.kernel.exceptions import (
    ConfigurationException,
    InvalidHeaderException,
    PyHelmetException,
)


class TestPyHelmetException:
    def test_basic_creation(self):
        exc = PyHelmetException("something went wrong")
        assert str(exc) == "something went wrong"
        assert exc.code is None
        assert exc.context == {}

    def test_with_code_and_context(self):
        exc = PyHelmetException("bad", code="CONFIG_INVALID", context={"prefix": "pyhelmet.helmet"})
        assert exc.code == "CONFIG_INVALID"
        assert exc.context["prefix"] == "pyhelmet.helmet"

    def test_context_not_shared(self):
        exc = PyHelmetException("test")
        exc.context["key"] = "value"
        assert PyHelmetException("test2").context == {}


class TestInvalidHeaderException:
    def test_carries_name_and_value(self):
        exc = InvalidHeaderException("Invalid header", "X-Bad", "a\nb")
        assert exc.name == "X-Bad"
        assert exc.value == "a\nb"
        assert exc.code == "INVALID_HEADER"
        assert exc.context == {"name": "X-Bad", "value": "a\nb"}

    def test_hierarchy(self):
        assert issubclass(InvalidHeaderException, ConfigurationException)
        assert issubclass(ConfigurationException, PyHelmetException)
