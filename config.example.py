# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "JIVOX_APP_NAME": "Assistant name shown in the greeting (default: Jivox).",
    "JIVOX_LOG_LEVEL": "Console logging level (default: WARNING).",
    "JIVOX_LOG_TO_FILE": "Write full DEBUG logs to <log_dir>/jivox.log (true/false, default: true).",
    # Paths (gitignored)
    "JIVOX_DATA_DIR": "Local data directory (default: .local/jivox).",
    "JIVOX_TASKS_PATH": "Task file path (default: <data_dir>/jivox.txt).",
    "JIVOX_LOG_DIR": "Log directory (default: <data_dir>).",
}
