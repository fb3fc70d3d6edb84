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
"""Build a :class:`Helmet` from bound configuration properties."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import structlog

from pyhelmet.config.properties.helmet import (
    ContentSecurityPolicyProperties,
    HelmetProperties,
    StrictTransportSecurityProperties,
    XXSSProtectionProperties,
)
from pyhelmet.core.config import Config
from pyhelmet.headers import (
    ContentSecurityPolicy,
    CrossOriginEmbedderPolicy,
    CrossOriginOpenerPolicy,
    CrossOriginResourcePolicy,
    CSPDirective,
    FrameOption,
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
from pyhelmet.kernel.exceptions import ConfigurationException
from pyhelmet.logging import LoggingPort, StructlogAdapter

logger = structlog.get_logger("pyhelmet.config")

# Same order as Helmet.default()
BASELINE_SLOTS: tuple[str, ...] = (
    "content_security_policy",
    "cross_origin_opener_policy",
    "cross_origin_resource_policy",
    "origin_agent_cluster",
    "referrer_policy",
    "strict_transport_security",
    "x_content_type_options",
    "x_dns_prefetch_control",
    "x_download_options",
    "x_frame_options",
    "x_permitted_cross_domain_policies",
    "x_xss_protection",
)

# Families outside the baseline, appended after it
EXTRA_SLOTS: tuple[str, ...] = (
    "cross_origin_embedder_policy",
    "x_powered_by",
)


def helmet_from_properties(props: HelmetProperties) -> Helmet:
    """Assemble the policy set described by *props*.

    Raises:
        ConfigurationException: If a directive keyword or frame option is unknown.
    """
    baseline = dict(zip(BASELINE_SLOTS, Helmet.default().headers, strict=True)) if props.defaults else {}
    excluded = {name.lower() for name in props.exclude}

    headers: list[Header] = []
    for slot in (*BASELINE_SLOTS, *EXTRA_SLOTS):
        configured = getattr(props, slot)
        header = _BUILDERS[slot](configured) if configured is not None else baseline.get(slot)
        if header is None or header.name().lower() in excluded:
            continue
        headers.append(header)

    logger.debug("helmet_configured", defaults=props.defaults, headers=[h.name() for h in headers])
    return Helmet(headers)


def helmet_from_config(config: Config, logging_port: LoggingPort | None = None) -> Helmet:
    """Configure pyhelmet logging if ``pyhelmet.logging.enabled`` is set, then bind and build.

    Logging is set up first so the ``helmet_configured`` event goes through it.
    """
    if _flag(config.get("pyhelmet.logging.enabled", False)):
        (logging_port if logging_port is not None else StructlogAdapter()).configure(config)
    return helmet_from_properties(config.bind(HelmetProperties))


def _flag(value: Any) -> bool:
    # PYHELMET_* environment overrides arrive as strings
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on")
    return bool(value)


def _content_security_policy(csp_props: ContentSecurityPolicyProperties) -> Header:
    if not csp_props.directives:
        csp = ContentSecurityPolicy.default()
    else:
        csp = ContentSecurityPolicy()
        for keyword, values in csp_props.directives.items():
            try:
                csp = csp.directive(CSPDirective(keyword, tuple(values)))
            except ValueError as exc:
                raise ConfigurationException(
                    f"Invalid Content-Security-Policy directive '{keyword}': {exc}",
                    code="CONFIG_INVALID",
                    context={"directive": keyword},
                ) from exc
    return csp.report_only() if csp_props.report_only else csp


def _strict_transport_security(hsts_props: StrictTransportSecurityProperties) -> Header:
    return StrictTransportSecurity(hsts_props.max_age, hsts_props.include_sub_domains, hsts_props.preload)


def _x_frame_options(configured: str) -> Header:
    option, _, uri = configured.strip().partition(" ")
    try:
        frame_option = FrameOption(option.lower())
    except ValueError as exc:
        raise ConfigurationException(
            f"Invalid X-Frame-Options value '{configured}'",
            code="CONFIG_INVALID",
            context={"x_frame_options": configured},
        ) from exc
    if frame_option is FrameOption.ALLOW_FROM:
        if not uri.strip():
            raise ConfigurationException("X-Frame-Options allow-from requires a uri", code="CONFIG_INVALID")
        return XFrameOptions.allow_from(uri.strip())
    return XFrameOptions(frame_option)


def _x_xss_protection(xss_props: XXSSProtectionProperties) -> Header:
    return XXSSProtection(xss_props.enabled, xss_props.mode_block, xss_props.report)


_BUILDERS: dict[str, Callable[[Any], Header]] = {
    "content_security_policy": _content_security_policy,
    "cross_origin_embedder_policy": CrossOriginEmbedderPolicy,
    "cross_origin_opener_policy": CrossOriginOpenerPolicy,
    "cross_origin_resource_policy": CrossOriginResourcePolicy,
    "origin_agent_cluster": OriginAgentCluster,
    "referrer_policy": ReferrerPolicy,
    "strict_transport_security": _strict_transport_security,
    "x_content_type_options": lambda _: XContentTypeOptions.nosniff(),
    "x_dns_prefetch_control": XDNSPrefetchControl,
    "x_download_options": lambda _: XDownloadOptions.noopen(),
    "x_frame_options": _x_frame_options,
    "x_permitted_cross_domain_policies": XPermittedCrossDomainPolicies,
    "x_xss_protection": _x_xss_protection,
    "x_powered_by": XPoweredBy,
}
