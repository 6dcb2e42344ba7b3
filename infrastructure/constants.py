from pathlib import Path

# Repo-root conventional directories/files (overrideable via settings.yaml and env)
CONFIG_DIR = Path("configs")
SETTINGS_FILE = CONFIG_DIR / "settings.yaml"
TAXONOMY_FILE = CONFIG_DIR / "taxonomy.yaml"

# Environment variable overrides
ENV_TAXONOMY_FILE = "TAXONOMY_FILE"
ENV_LOG_FILE = "LOG_FILE"
ENV_LOG_LEVEL = "LOG_LEVEL"
