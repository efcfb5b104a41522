"""UI messages and strings for spec-cli.

This module consolidates all user-facing messages including:
- Success/error/info/warning messages
- Help text
- Interactive prompts
"""

# =============================================================================
# Project Metadata
# =============================================================================

PROJECT_TAGLINE = "Spec CLI - Standardize Feature development workflow"

# =============================================================================
# Help
# =============================================================================

HELP_TEXT = f"""
[bold cyan]spec[/bold cyan] - {PROJECT_TAGLINE}

[bold]Commands:[/bold]
  [cyan]init[/cyan]        Initialize Spec CLI configuration
  [cyan]create[/cyan]      Create a new feature branch with docs and scaffold files
  [cyan]list[/cyan]        List all features
  [cyan]merge[/cyan]       Merge a feature branch to the default target branch
  [cyan]version[/cyan]     Show version information

[bold]Examples:[/bold]
  [dim]$ spec init[/dim]
  [dim]$ spec create "Add password reset via email"[/dim]
  [dim]$ spec merge add-password-reset --verbose[/dim]
"""

# =============================================================================
# Success Messages
# =============================================================================

SUCCESS_MESSAGES = {
    "config_saved": "Configuration saved to {path}",
    "feature_created": "Feature created successfully!",
    "feature_slug": "Feature slug: {slug}",
    "feature_branch": "Branch: {branch}",
    "feature_merged": "Feature merged successfully!",
    "merge_commit": "Merge commit: {hash}",
    "template_added": "Added template: {template}",
    "template_removed": "Removed template: {template}",
}

# =============================================================================
# Error Messages
# =============================================================================

ERROR_MESSAGES = {
    "not_git_repo": "Not in a Git repository. Please run this command in a Git repository.",
    "dirty_tree": "Working tree is not clean. Please commit or stash your changes first.",
    "config_not_found": "Configuration file not found: {config_file}. Run 'spec init' first.",
    "config_invalid": "Invalid configuration: {details}",
    "settings_invalid": "Invalid generator settings: {details}",
    "missing_api_key": (
        "OPENAI_API_KEY environment variable is required. "
        "Please set it before running this command."
    ),
    "invalid_slug": "Invalid feature slug format: '{slug}'",
    "feature_branch_missing": "Feature branch '{branch}' does not exist.",
    "target_branch_missing": (
        "Target branch '{branch}' does not exist locally. "
        "Please create it or set upstream first."
    ),
    "generation_exhausted": "Failed to generate valid slug after {attempts} attempts",
    "transport_failure": "Failed to generate slug after {attempts} attempts: {error}",
    "uniqueness_exhausted": "Failed to generate unique slug after {attempts} attempts",
    "create_failed": "Failed to create feature",
    "merge_failed": "Failed to merge feature",
    "list_failed": "Failed to list features: {error}",
    "init_failed": "Failed to initialize: {error}",
    "merge_conflicts": "Merge conflicts detected.",
    "config_exists": "{path} already exists. Use --force to overwrite it.",
    "doc_template_escapes": (
        "Doc template '{template}' must be a file name inside the feature folder"
    ),
}

# =============================================================================
# Info Messages
# =============================================================================

INFO_MESSAGES = {
    "slug_rules": "Slug must be kebab-case (lowercase letters, numbers, and hyphens)",
    "docs_created": "Created {count} documentation files",
    "scaffold_created": "Created {count} scaffold paths",
    "create_outro": "You can now start developing your feature.",
    "pushed_to": "Pushed to: {upstream}",
    "merge_outro": "Feature '{slug}' has been merged to '{target}'.",
    "init_cancelled": "Initialization cancelled.",
    "init_intro": "Initializing Spec CLI configuration",
    "detected_scaffold": "Detected test scaffold candidates: {candidates}",
    "resolve_conflicts": (
        "Please resolve conflicts manually:\n"
        "  1. Fix conflicts in the affected files\n"
        "  2. Run: git add <resolved-files>\n"
        "  3. Run: git commit\n"
        "  4. Run: git push"
    ),
}

# =============================================================================
# Warning Messages
# =============================================================================

WARNING_MESSAGES = {
    "scaffold_needs_slug": "Path must include {slug} placeholder",
    "template_not_markdown": "Template should be a markdown file (.md)",
    "template_not_file_name": "Template must be a file name, not a path",
    "template_exists": "Template '{template}' already exists",
    "no_templates": "No templates selected, using default",
    "template_not_found": "Template '{template}' is not in the list",
    "unknown_action": "Unknown action '{action}'. Choose add, remove or done.",
}

# =============================================================================
# Interactive Prompts
# =============================================================================

PROMPTS = {
    "overwrite_config": "{path} already exists. Overwrite?",
    "docs_dir": "Documentation directory",
    "use_scaffold_candidate": "Use detected scaffold path '{candidate}'?",
    "add_scaffold_paths": "Add more scaffold paths manually?",
    "scaffold_path": "Enter scaffold path template (must include {slug})",
    "another_scaffold_path": "Add another scaffold path?",
    "branch_format": "Branch naming format",
    "merge_target": "Default merge target branch",
    "use_doc_template": "Include document template '{template}'?",
    "edit_doc_templates": "Add or edit document templates manually?",
    "doc_template_action": "Document templates action (add, remove, done)",
    "doc_template_name": "Enter template filename (e.g., overview.md)",
    "doc_template_remove": "Template to remove ({templates})",
}

# =============================================================================
# Step Messages
# =============================================================================

STEP_MESSAGES = {
    "preflight": "Checking repository state",
    "generate_slug": "Generating feature slug",
    "create_branch": "Creating feature branch",
    "create_docs": "Creating documentation structure",
    "create_scaffold": "Creating scaffold paths",
    "commit": "Committing initial structure",
    "switch_target": "Switching to target branch '{target}'",
    "pull": "Pulling latest changes",
    "merge": "Merging feature branch '{branch}'",
    "push": "Pushing changes",
}

# =============================================================================
# UI Styling
# =============================================================================

COLORS = {
    "primary": "cyan",
    "success": "green",
    "warning": "yellow",
    "error": "red",
}
