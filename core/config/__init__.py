from .validators import group_issues, report_issues, validate_config_on_startup

__all__ = ["group_issues", "report_issues", "validate_config_on_startup"]
