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
"""PyHelmet — security response headers for ASGI applications.

Usage::

    from starlette.applications import Starlette
    from starlette.middleware import Middleware

    from pyhelmet import Helmet, HelmetMiddleware, XPoweredBy

    helmet = Helmet.default().add(XPoweredBy("PHP 4.2.0"))
    app = Starlette(middleware=[Middleware(HelmetMiddleware, helmet=helmet)])
"""

from pyhelmet.core.config import Config
from pyhelmet.headers import (
    ContentSecurityPolicy,
    CrossOriginEmbedderPolicy,
    CrossOriginOpenerPolicy,
    CrossOriginResourcePolicy,
    CSPDirective,
    Directive,
    Header,
    OriginAgentCluster,
    ReferrerPolicy,
    StrictTransportSecurity,
    XContentTypeOptions,
    XDNSPrefetchControl,
    XDownloadOptions,
    XFrameOptions,
    XPermittedCrossDomainPolicies,
    XPoweredBy,
    XXSSProtection,
)
from pyhelmet.helmet import Helmet
from pyhelmet.kernel.exceptions import (
    ConfigurationException,
    InvalidHeaderException,
    PyHelmetException,
)
from pyhelmet.web import HeaderInjector, HelmetMiddleware

__version__ = "0.1.0"

__all__ = [
    "CSPDirective",
    "Config",
    "ConfigurationException",
    "ContentSecurityPolicy",
    "CrossOriginEmbedderPolicy",
    "CrossOriginOpenerPolicy",
    "CrossOriginResourcePolicy",
    "Directive",
    "Header",
    "HeaderInjector",
    "Helmet",
    "HelmetMiddleware",
    "InvalidHeaderException",
    "OriginAgentCluster",
    "PyHelmetException",
    "ReferrerPolicy",
    "StrictTransportSecurity",
    "XContentTypeOptions",
    "XDNSPrefetchControl",
    "XDownloadOptions",
    "XFrameOptions",
    "XPermittedCrossDomainPolicies",
    "XPoweredBy",
    "XXSSProtection",
]
