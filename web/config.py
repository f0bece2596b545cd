"""
Service configuration loader.
Reads settings from config/settings.yaml and applies environment overrides.
"""

import os
from pathlib import Path
import yaml


DEFAULT_PORT = 3000
DEFAULT_BROWSER_ARGS = ["--no-sandbox", "--disable-setuid-sandbox"]


def get_project_root() -> Path:
    """Get the project root directory."""
    return Path(__file__).resolve().parent.parent


def get_settings_path() -> Path:
    """Get the settings file path, honouring SALES_OFFER_SETTINGS."""
    override = os.environ.get("SALES_OFFER_SETTINGS")
    if override:
        return Path(override)
    return get_project_root() / "config" / "settings.yaml"


def get_settings() -> dict:
    """
    Load settings from settings.yaml.
    A missing file yields an empty dict so every getter falls back to defaults.
    """
    settings_path = get_settings_path()
    if not settings_path.exists():
        return {}

    with open(settings_path, 'r') as f:
        settings = yaml.safe_load(f)

    return settings or {}


def get_server_config() -> dict:
    """Get host/port/reload for uvicorn."""
    config = get_settings().get('server', {})
    return {
        'host': config.get('host', '0.0.0.0'),
        'port': int(os.environ.get('PORT', config.get('port', DEFAULT_PORT))),
        'reload': bool(config.get('reload', False)),
    }


def get_cors_origins() -> list:
    """Get allowed CORS origins."""
    return get_settings().get('cors', {}).get('allow_origins', ["*"])


def get_templates_dir() -> Path:
    """Get the directory holding the offer page templates."""
    directory = get_settings().get('templates', {}).get('directory')
    if not directory:
        return get_project_root() / "web" / "templates" / "offer"

    path = Path(directory)
    if not path.is_absolute():
        path = get_project_root() / path
    return path


def get_static_dir() -> Path:
    """Get the directory served at /static, which also holds the brochure stylesheet."""
    return get_project_root() / "web" / "static"


def get_renderer_config() -> dict:
    """Get headless browser and PDF options."""
    config = get_settings().get('renderer', {})
    return {
        'browser_args': config.get('browser_args', DEFAULT_BROWSER_ARGS),
        'pdf_format': config.get('pdf_format', 'A4'),
        'print_background': bool(config.get('print_background', True)),
        'wait_until': config.get('wait_until', 'networkidle'),
    }


def get_log_level() -> str:
    """Get the root log level name."""
    level = os.environ.get('LOG_LEVEL') or get_settings().get('logging', {}).get('level', 'INFO')
    return str(level).upper()
