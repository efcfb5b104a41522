"""Tests for FeatureService: documentation store, scaffold planning and creation."""

from pathlib import Path

import pytest

from spec_cli.exceptions import ConfigurationError
from spec_cli.models.config import SpecConfig
from spec_cli.services.feature_service import FeatureService, expand_template


@pytest.fixture
def service(temp_project_dir: Path) -> FeatureService:
    config = SpecConfig(
        docs_dir="docs",
        doc_templates=["requirements.md", "tech-spec.md"],
        scaffold_paths=["tests/test_{slug}.py", "src/features/{slug}/"],
    )
    return FeatureService(temp_project_dir, config)


def test_expand_template_replaces_every_placeholder() -> None:
    assert expand_template("src/{slug}/{slug}.ts", "add-search") == "src/add-search/add-search.ts"


# =============================================================================
# Documentation store
# =============================================================================


class TestListFeatures:
    """Tests for list_feature_slugs()."""

    def test_missing_docs_dir_is_empty(self, service: FeatureService) -> None:
        assert service.list_feature_slugs() == []

    def test_lists_slug_directories_sorted(
        self, service: FeatureService, temp_project_dir: Path
    ) -> None:
        docs = temp_project_dir / "docs"
        for name in ["zeta-feature", "add-login", "Not_A_Slug", "-bad-"]:
            (docs / name).mkdir(parents=True)
        (docs / "readme-file").write_text("not a directory", encoding="utf-8")

        assert service.list_feature_slugs() == ["add-login", "zeta-feature"]

    def test_feature_exists(self, service: FeatureService, temp_project_dir: Path) -> None:
        (temp_project_dir / "docs" / "add-login").mkdir(parents=True)
        assert service.feature_exists("add-login")
        assert not service.feature_exists("add-logout")


# =============================================================================
# Scaffold planning
# =============================================================================


class TestPlanScaffoldPaths:
    """Tests for plan_scaffold_paths()."""

    def test_free_paths_are_valid(self, service: FeatureService, temp_project_dir: Path) -> None:
        plan = service.plan_scaffold_paths("add-search")
        assert plan.valid
        assert plan.conflicts == []
        assert plan.paths == [
            temp_project_dir / "tests/test_add-search.py",
            temp_project_dir / "src/features/add-search/",
        ]

    def test_existing_path_conflicts(self, service: FeatureService, temp_project_dir: Path) -> None:
        (temp_project_dir / "src" / "features" / "add-search").mkdir(parents=True)
        plan = service.plan_scaffold_paths("add-search")
        assert not plan.valid
        assert plan.conflicts == ["src/features/add-search/"]

    @pytest.mark.parametrize(
        "template",
        ["../outside/{slug}.py", "{slug}/../../escape.py", "/tmp/{slug}.py"],
    )
    def test_paths_outside_repository_conflict(
        self, service: FeatureService, template: str
    ) -> None:
        plan = service.plan_scaffold_paths("add-search", templates=[template])
        assert not plan.valid
        assert plan.conflicts == [template.replace("{slug}", "add-search")]

    def test_repository_root_itself_conflicts(self, service: FeatureService) -> None:
        plan = service.plan_scaffold_paths("x", templates=["{slug}/.."])
        assert not plan.valid


# =============================================================================
# Scaffolding
# =============================================================================


class TestScaffolding:
    """Tests for create_feature_docs() and create_scaffold_paths()."""

    def test_create_feature_docs(self, service: FeatureService, temp_project_dir: Path) -> None:
        created = service.create_feature_docs("add-search")

        feature_dir = temp_project_dir / "docs" / "add-search"
        assert created == [feature_dir / "requirements.md", feature_dir / "tech-spec.md"]
        assert all(p.is_file() and p.read_text(encoding="utf-8") == "" for p in created)

    def test_create_scaffold_paths(self, service: FeatureService, temp_project_dir: Path) -> None:
        created = service.create_scaffold_paths("add-search")

        test_file = temp_project_dir / "tests" / "test_add-search.py"
        feature_dir = temp_project_dir / "src" / "features" / "add-search"
        assert test_file.is_file()
        assert feature_dir.is_dir()
        assert len(created) == 2

    def test_relative_paths(self, service: FeatureService, temp_project_dir: Path) -> None:
        paths = [temp_project_dir / "docs" / "a" / "requirements.md", temp_project_dir / "x.py"]
        assert service.relative_paths(paths) == ["docs/a/requirements.md", "x.py"]

    @pytest.mark.parametrize("template", ["../../escaped.md", "nested/escaped.md", ".."])
    def test_doc_template_outside_feature_folder_writes_nothing(
        self, temp_project_dir: Path, template: str
    ) -> None:
        # model_construct skips validation, as a hand-built config would
        config = SpecConfig.model_construct(doc_templates=["requirements.md", template])
        service = FeatureService(temp_project_dir, config)

        with pytest.raises(ConfigurationError, match="inside the feature folder"):
            service.create_feature_docs("add-search")

        assert not (temp_project_dir / "escaped.md").exists()
        assert not (temp_project_dir / "docs").exists()

    def test_absolute_doc_template_writes_nothing(
        self, temp_project_dir: Path, tmp_path: Path
    ) -> None:
        outside = tmp_path / "escaped.md"
        config = SpecConfig.model_construct(doc_templates=[str(outside)])
        service = FeatureService(temp_project_dir, config)

        with pytest.raises(ConfigurationError):
            service.create_feature_docs("add-search")

        assert not outside.exists()
