"""Built-in catalogs for Claude Code style assistant configuration.

All keywords are stored case-folded because the detector matches them
against the case-folded scan copy of the input. Short keywords are avoided
where they would collide with ordinary words (``rust`` inside ``trust``,
``.js`` inside ``.json``); the remaining approximation is accepted.
"""

from __future__ import annotations

from configforge.catalog.models import (
    Catalog,
    FileLocation,
    KeywordEntry,
    McpServerEntry,
    SettingsField,
)

HOOK_EVENTS: tuple[str, ...] = (
    "PreToolUse",
    "PostToolUse",
    "PostToolUseFailure",
    "Notification",
    "UserPromptSubmit",
    "Stop",
    "SubagentStart",
    "SubagentStop",
    "PreCompact",
    "SessionStart",
    "SessionEnd",
    "PermissionRequest",
)

HOOK_MECHANISMS: tuple[str, ...] = ("command", "prompt", "agent")

PERMISSION_LISTS: tuple[str, ...] = ("allow", "ask", "deny")

PERMISSION_FAMILIES: tuple[str, ...] = (
    "Bash",
    "Read",
    "Edit",
    "Write",
    "WebFetch",
    "mcp",
)

SANDBOX_FIELDS: tuple[str, ...] = (
    "enabled",
    "autoAllowBashIfSandboxed",
    "excludedCommands",
    "allowUnsandboxedCommands",
    "network",
    "allowUnixSockets",
    "allowLocalBinding",
    "enableWeakerNestedSandbox",
)


def _settings(category: str, *keys: str) -> list[SettingsField]:
    return [SettingsField(key=key, category=category) for key in keys]


SETTINGS_FIELDS: tuple[SettingsField, ...] = tuple(
    _settings("model", "model", "outputStyle", "alwaysThinkingEnabled")
    + _settings(
        "permissions",
        "permissions",
        "defaultMode",
        "additionalDirectories",
        "disableBypassPermissionsMode",
    )
    + _settings("hooks", "hooks", "disableAllHooks")
    + _settings("sandbox", "sandbox")
    + _settings("environment", "env", "apiKeyHelper", "awsAuthRefresh", "awsCredentialExport")
    + _settings(
        "mcp",
        "enableAllProjectMcpServers",
        "enabledMcpjsonServers",
        "disabledMcpjsonServers",
    )
    + _settings("interface", "statusLine", "spinnerTipsEnabled", "includeCoAuthoredBy")
    + _settings("account", "forceLoginMethod", "forceLoginOrgUUID", "otelHeadersHelper")
    + _settings(
        "maintenance",
        "cleanupPeriodDays",
        "autoUpdates",
        "companyAnnouncements",
        "plansDirectory",
    )
)

RULE_TOPICS: tuple[KeywordEntry, ...] = (
    KeywordEntry("security", ("security", "secret", "auth")),
    KeywordEntry("testing", ("test", "tdd", "coverage")),
    KeywordEntry("code-style", ("style", "format", "lint", "convention")),
    KeywordEntry("git-workflow", ("git", "commit", "branch", "pr-")),
    KeywordEntry("documentation", ("doc", "readme", "comment")),
    KeywordEntry("performance", ("perf", "optimi", "cache")),
    KeywordEntry("error-handling", ("error", "exception", "logging")),
    KeywordEntry("api-design", ("api", "endpoint", "rest", "graphql")),
    KeywordEntry("architecture", ("architecture", "design", "structure", "pattern")),
    KeywordEntry("dependencies", ("dependenc", "package", "deps", "vendor")),
)

FILE_LOCATIONS: tuple[FileLocation, ...] = (
    FileLocation("project_instructions", "CLAUDE.md", ("claude.md",)),
    FileLocation("local_instructions", "CLAUDE.local.md", ("claude.local.md",), "local"),
    FileLocation("settings", ".claude/settings.json", (".claude/settings.json",)),
    FileLocation(
        "local_settings",
        ".claude/settings.local.json",
        ("settings.local.json",),
        "local",
    ),
    FileLocation("mcp_config", ".mcp.json", (".mcp.json",)),
    FileLocation("plugin_manifest", ".claude-plugin/plugin.json", ("plugin.json",)),
    FileLocation("rules_dir", ".claude/rules/", (".claude/rules",)),
    FileLocation("skills_dir", ".claude/skills/", (".claude/skills",)),
    FileLocation("agents_dir", ".claude/agents/", (".claude/agents",)),
    FileLocation("commands_dir", ".claude/commands/", (".claude/commands",)),
    FileLocation("hooks_dir", ".claude/hooks/", (".claude/hooks",)),
    FileLocation("contexts_dir", ".claude/contexts/", (".claude/contexts",)),
    FileLocation(
        "global_instructions",
        "~/.claude/CLAUDE.md",
        ("~/.claude/claude.md",),
        "global",
    ),
    FileLocation(
        "global_settings",
        "~/.claude/settings.json",
        ("~/.claude/settings.json",),
        "global",
    ),
    FileLocation("global_mcp_config", "~/.claude.json", ("~/.claude.json",), "global"),
    FileLocation(
        "managed_settings",
        "managed-settings.json",
        ("managed-settings.json",),
        "managed",
    ),
)

LANGUAGES: tuple[KeywordEntry, ...] = (
    KeywordEntry("python", ("python", "pyproject.toml", "requirements.txt", "setup.py")),
    KeywordEntry("typescript", ("typescript", "tsconfig.json", ".tsx")),
    KeywordEntry("javascript", ("javascript", "package.json", ".mjs", ".jsx")),
    KeywordEntry("go", ("go.mod", "golang")),
    KeywordEntry("rust", ("cargo.toml", "rustc", "rustfmt")),
    KeywordEntry("java", ("pom.xml", "build.gradle", ".java")),
    KeywordEntry("kotlin", ("kotlin", ".kt")),
    KeywordEntry("ruby", ("gemfile", ".rb")),
    KeywordEntry("php", ("composer.json", ".php")),
    KeywordEntry("csharp", (".csproj", "c#", "dotnet")),
    KeywordEntry("swift", ("package.swift", ".swift")),
)

FRAMEWORKS: tuple[KeywordEntry, ...] = (
    KeywordEntry("react", ("react",)),
    KeywordEntry("nextjs", ("next.config", "nextjs", "next.js")),
    KeywordEntry("vue", ("vue",)),
    KeywordEntry("angular", ("angular",)),
    KeywordEntry("svelte", ("svelte",)),
    KeywordEntry("django", ("django",)),
    KeywordEntry("fastapi", ("fastapi",)),
    KeywordEntry("flask", ("flask",)),
    KeywordEntry("express", ("express",)),
    KeywordEntry("rails", ("rails",)),
    KeywordEntry("spring", ("spring-boot", "springframework")),
)

DATABASES: tuple[KeywordEntry, ...] = (
    KeywordEntry("postgresql", ("postgres", "psql")),
    KeywordEntry("mysql", ("mysql",)),
    KeywordEntry("sqlite", ("sqlite",)),
    KeywordEntry("mongodb", ("mongodb", "mongoose")),
    KeywordEntry("redis", ("redis",)),
    KeywordEntry("dynamodb", ("dynamodb",)),
    KeywordEntry("supabase", ("supabase",)),
)

INFRA: tuple[KeywordEntry, ...] = (
    KeywordEntry("docker", ("dockerfile", "docker-compose", "docker")),
    KeywordEntry("kubernetes", ("kubernetes", "kubectl", "k8s")),
    KeywordEntry("terraform", ("terraform",)),
    KeywordEntry("aws", ("amazonaws", "aws-cdk", "aws_", "aws-sdk")),
    KeywordEntry("gcp", ("gcloud", "google cloud")),
    KeywordEntry("azure", ("azure",)),
    KeywordEntry("github-actions", (".github/workflows",)),
    KeywordEntry("vercel", ("vercel",)),
)

MCP_SERVERS: tuple[McpServerEntry, ...] = (
    McpServerEntry("github", ("server-github", "github-mcp"), "GitHub issues, PRs and code"),
    McpServerEntry("filesystem", ("server-filesystem",), "Scoped filesystem access"),
    McpServerEntry("postgres", ("server-postgres", "postgres-mcp"), "PostgreSQL queries"),
    McpServerEntry("sqlite", ("server-sqlite", "sqlite-mcp"), "SQLite queries"),
    McpServerEntry("slack", ("server-slack", "slack-mcp"), "Slack messaging"),
    McpServerEntry("memory", ("server-memory",), "Knowledge-graph memory"),
    McpServerEntry("fetch", ("server-fetch",), "Web page fetching"),
    McpServerEntry("puppeteer", ("puppeteer",), "Headless browser automation"),
    McpServerEntry("playwright", ("playwright",), "Browser automation and testing"),
    McpServerEntry("brave-search", ("brave-search",), "Web search"),
    McpServerEntry("sentry", ("sentry-mcp", "mcp.sentry"), "Error monitoring"),
    McpServerEntry("context7", ("context7",), "Library documentation lookup"),
    McpServerEntry("sequential-thinking", ("sequential-thinking",), "Structured reasoning"),
    McpServerEntry("linear", ("linear-mcp", "mcp.linear.app"), "Linear issue tracking"),
    McpServerEntry("notion", ("notion-mcp", "mcp.notion"), "Notion workspace access"),
)

CORE_HOOK_EVENTS: tuple[str, ...] = (
    "PreToolUse",
    "PostToolUse",
    "UserPromptSubmit",
    "Stop",
    "Notification",
)


DEFAULT_CATALOG = Catalog(
    hook_events=HOOK_EVENTS,
    hook_mechanisms=HOOK_MECHANISMS,
    permission_lists=PERMISSION_LISTS,
    permission_families=PERMISSION_FAMILIES,
    settings_fields=SETTINGS_FIELDS,
    sandbox_fields=SANDBOX_FIELDS,
    rule_topics=RULE_TOPICS,
    file_locations=FILE_LOCATIONS,
    languages=LANGUAGES,
    frameworks=FRAMEWORKS,
    databases=DATABASES,
    infra=INFRA,
    mcp_servers=MCP_SERVERS,
    core_hook_events=CORE_HOOK_EVENTS,
)
