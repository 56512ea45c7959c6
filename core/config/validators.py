"""
Startup Validation
==================

Checks run once when Django starts. Each check produces severity-prefixed
issue strings ("CRITICAL: ...", "WARNING: ...", "INFO: ...");
``report_issues`` logs them and, in production, turns CRITICAL issues into
``ImproperlyConfigured`` so a broken deployment never serves chat traffic.

Checks:
    - ``validate_config_on_startup``: environment variables and assistant
      thresholds (``albait.config.AppConfig.validate``), from CoreConfig.ready()
    - the assistant catalog audit, from assistant.apps.AssistantConfig.ready()
"""

import logging
from typing import Dict, Iterable, List

from django.core.exceptions import ImproperlyConfigured

logger = logging.getLogger(__name__)

SEVERITY_LEVELS = {
    "CRITICAL": logging.CRITICAL,
    "WARNING": logging.WARNING,
    "INFO": logging.INFO,
}


def group_issues(issues: Iterable[str]) -> Dict[str, List[str]]:
    """Issues by severity prefix; unprefixed issues count as warnings."""
    grouped: Dict[str, List[str]] = {severity: [] for severity in SEVERITY_LEVELS}
    for issue in issues:
        severity = issue.split(":", 1)[0].strip().upper()
        grouped.get(severity, grouped["WARNING"]).append(issue)
    return grouped


def report_issues(issues: Iterable[str], source: str, fatal: bool = False) -> Dict[str, List[str]]:
    """
    Log startup issues of one source.

    Args:
        issues: Severity-prefixed issue strings
        source: What was checked ("configuration", "catalog"), for the log
        fatal: Raise ImproperlyConfigured when any issue is CRITICAL

    Returns:
        The issues grouped by severity
    """
    grouped = group_issues(issues)

    if not any(grouped.values()):
        logger.info(f"Startup check passed: {source}")
        return grouped

    for severity, level in SEVERITY_LEVELS.items():
        for issue in grouped[severity]:
            logger.log(level, f"[{source}] {issue}")

    if fatal and grouped["CRITICAL"]:
        raise ImproperlyConfigured(
            f"Startup check failed ({source}):\n"
            + "\n".join(f"  • {i}" for i in grouped["CRITICAL"])
        )
    return grouped


def validate_config_on_startup():
    """Environment and threshold checks; CRITICAL issues are fatal in production."""
    from albait.config import config

    report_issues(config.validate(), "configuration", fatal=config.is_production)
    config.log_status()
