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
"""Policy-set configuration properties (pyhelmet.helmet.*)."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from pyhelmet.core.config import config_properties
from pyhelmet.headers.cross_origin import EmbedderPolicy, OpenerPolicy, ResourcePolicy
from pyhelmet.headers.legacy import CrossDomainPolicy, DNSPrefetch
from pyhelmet.headers.referrer_policy import Referrer
from pyhelmet.headers.transport_security import MAX_AGE_LIMIT


class ContentSecurityPolicyProperties(BaseModel):
    """Directives are applied in mapping order; an empty mapping selects the baseline policy."""

    directives: dict[str, list[str]] = Field(default_factory=dict)
    report_only: bool = False


class StrictTransportSecurityProperties(BaseModel):
    max_age: int = Field(default=31536000, ge=0, le=MAX_AGE_LIMIT)
    include_sub_domains: bool = False
    preload: bool = False


class XXSSProtectionProperties(BaseModel):
    enabled: bool = False
    mode_block: bool = False
    report: str | None = None


@config_properties(prefix="pyhelmet.helmet")
class HelmetProperties(BaseModel):
    """Declarative description of a policy set.

    With ``defaults`` enabled the baseline headers are emitted in their usual
    order and any family configured here replaces its baseline entry.
    ``x_frame_options`` accepts ``deny``, ``same-origin`` or
    ``allow-from <uri>``. Header names listed in ``exclude`` are dropped.
    """

    defaults: bool = True
    content_security_policy: ContentSecurityPolicyProperties | None = None
    cross_origin_embedder_policy: EmbedderPolicy | None = None
    cross_origin_opener_policy: OpenerPolicy | None = None
    cross_origin_resource_policy: ResourcePolicy | None = None
    origin_agent_cluster: bool | None = None
    referrer_policy: Referrer | None = None
    strict_transport_security: StrictTransportSecurityProperties | None = None
    x_content_type_options: Literal["nosniff"] | None = None
    x_dns_prefetch_control: DNSPrefetch | None = None
    x_download_options: Literal["noopen"] | None = None
    x_frame_options: str | None = None
    x_permitted_cross_domain_policies: CrossDomainPolicy | None = None
    x_xss_protection: XXSSProtectionProperties | None = None
    x_powered_by: str | None = None
    exclude: list[str] = Field(default_factory=list)
