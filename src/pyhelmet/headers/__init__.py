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
"""PyHelmet Headers — typed response header families."""

from pyhelmet.headers.cross_origin import (
    CrossOriginEmbedderPolicy,
    CrossOriginOpenerPolicy,
    CrossOriginResourcePolicy,
    EmbedderPolicy,
    OpenerPolicy,
    OriginAgentCluster,
    ResourcePolicy,
)
from pyhelmet.headers.csp import ContentSecurityPolicy, CSPDirective, Directive
from pyhelmet.headers.legacy import (
    CrossDomainPolicy,
    DNSPrefetch,
    FrameOption,
    XContentTypeOptions,
    XDNSPrefetchControl,
    XDownloadOptions,
    XFrameOptions,
    XPermittedCrossDomainPolicies,
    XPoweredBy,
    XXSSProtection,
)
from pyhelmet.headers.port import Header
from pyhelmet.headers.referrer_policy import Referrer, ReferrerPolicy
from pyhelmet.headers.transport_security import StrictTransportSecurity

__all__ = [
    "CSPDirective",
    "ContentSecurityPolicy",
    "CrossDomainPolicy",
    "CrossOriginEmbedderPolicy",
    "CrossOriginOpenerPolicy",
    "CrossOriginResourcePolicy",
    "DNSPrefetch",
    "Directive",
    "EmbedderPolicy",
    "FrameOption",
    "Header",
    "OpenerPolicy",
    "OriginAgentCluster",
    "Referrer",
    "ReferrerPolicy",
    "ResourcePolicy",
    "StrictTransportSecurity",
    "XContentTypeOptions",
    "XDNSPrefetchControl",
    "XDownloadOptions",
    "XFrameOptions",
    "XPermittedCrossDomainPolicies",
    "XPoweredBy",
    "XXSSProtection",
]
