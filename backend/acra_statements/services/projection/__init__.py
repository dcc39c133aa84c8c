"""
projection — reshape a canonical statement into named framework views.

Usage:
    from acra_statements.services.projection import project

    view = project(document, "analytical")
    view["_frameworkMetadata"]["name"]  # "Analytical Framework"
"""

from acra_statements.services.projection.frameworks import (
    FrameworkError,
    FrameworkInfo,
    list_frameworks,
    resolve_framework_id,
)
from acra_statements.services.projection.projector import project, project_all

__all__ = [
    "FrameworkError",
    "FrameworkInfo",
    "list_frameworks",
    "project",
    "project_all",
    "resolve_framework_id",
]
