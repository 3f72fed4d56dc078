# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "SMART_TASKS_APP_NAME": "App display name (default: smart-tasks).",
    "SMART_TASKS_LOG_LEVEL": "Console logging level (default: INFO). The log file always gets DEBUG.",
    # Paths (gitignored)
    "SMART_TASKS_DATA_DIR": "Local directory for the log file (default: .local/smart-tasks).",
    # Behaviour
    "SMART_TASKS_SEED_DEMO_TASKS": "Start with the four demo tasks (true/false, default: true).",
    "SMART_TASKS_NOTIFICATIONS_ENABLED": "Print create/update/delete summaries (true/false, default: true).",
    # Rendering
    "SMART_TASKS_DESCRIPTION_PREVIEW_CHARS": "Max description characters on a task card (default: 120, min 16).",
}
