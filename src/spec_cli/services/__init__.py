"""Services for spec-cli business logic."""

from spec_cli.services.config_service import ConfigService, get_config_service
from spec_cli.services.feature_service import FeatureService, ScaffoldPlan
from spec_cli.services.git_service import GitService, find_repo_root
from spec_cli.services.scaffold_detection import detect_test_frameworks
from spec_cli.services.slug_service import SlugResolver
from spec_cli.services.workflow_service import CreateResult, MergeResult, WorkflowService

__all__ = [
    "ConfigService",
    "get_config_service",
    "CreateResult",
    "FeatureService",
    "GitService",
    "MergeResult",
    "ScaffoldPlan",
    "SlugResolver",
    "WorkflowService",
    "detect_test_frameworks",
    "find_repo_root",
]
