# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
Do NOT commit real secrets. Use:
- .env (local, gitignored)
- CI project settings / contexts for CI builds

This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "TASKDEMO_APP_NAME": "App display name (default: task_demo).",
    "TASKDEMO_LOG_LEVEL": "Console logging level (default: INFO).",
    "TASKDEMO_LOG_FILE_LEVEL": "Level for <data_dir>/task_demo.log (default: DEBUG).",
    "TASKDEMO_DATA_DIR": "Local data directory for logs (default: .local/task_demo).",
    # Console
    "TASKDEMO_CONSOLE_ENABLED": "Run the console REPL (true/false, default: true).",
    "TASKDEMO_SEED_SAMPLE_TASKS": "Start with the demo tasks (true/false, default: true).",
    # Secrets
    "TASKDEMO_SECRET_SERVICE": "Namespace for stored secrets (default: com.example.task_demo).",
    "TASKDEMO_SECRETS_PATH": "JSON file for secrets (empty => in-memory only).",
    # Backend / third-party keys (plain names are read as fallbacks, e.g. in CI)
    "TASKDEMO_API_BASE_URL": "API base URL; fallback API_BASE_URL (default: https://api.example.com).",
    "TASKDEMO_API_KEY": "Backend API key; fallback API_KEY.",
    "TASKDEMO_ANALYTICS_KEY": "Analytics key; fallback ANALYTICS_KEY (default: dev-analytics-key).",
    "TASKDEMO_CRASH_REPORTING_KEY": (
        "Crash reporting key; fallback CRASH_REPORTING_KEY (default: dev-crash-key)."
    ),
    # Build
    "TASKDEMO_BUILD": "Force build configuration: debug | ci | release.",
    "CI / CIRCLECI": "Set to 'true' by CI; selects the ci build configuration.",
}
