import os

from dotenv import find_dotenv, load_dotenv

from statement_ledger.logger import get_logger

logger = get_logger(__name__)


CONFIG_FILENAME = "config.yaml"
DEFAULT_STATEMENT_ENCODING = "utf-8"

_CONFIG_FILE_PATH: str | None = None
_CONFIG_FILE_VALUES: dict[str, str] = {}

_CONFIG_KEYS = (
    "LOG_LEVEL",
    "LOG_DIR",
    "STATEMENT_ENCODING",
)


def _resolve_dotenv_path() -> str | None:
    config_dir = os.getenv("CONFIG_DIR")
    if config_dir:
        candidate = os.path.join(config_dir, ".env")
        if os.path.exists(candidate):
            return candidate
    resolved = find_dotenv(usecwd=True)
    return resolved or None


def _resolve_config_path() -> str:
    config_dir = os.getenv("CONFIG_DIR")
    if config_dir:
        return os.path.join(config_dir, CONFIG_FILENAME)
    cwd = os.getcwd()
    candidate = os.path.join(cwd, "config", CONFIG_FILENAME)
    if os.path.exists(candidate):
        return candidate
    return os.path.join(cwd, CONFIG_FILENAME)


def _parse_config_value(raw_value: str) -> str:
    value = raw_value.strip()
    if value[:1] in {'"', "'"}:
        quote = value[0]
        end = value.find(quote, 1)
        if end != -1:
            return value[1:end]
    if " #" in value:
        value = value.split(" #", 1)[0]
    return value.strip()


def read_config_file(path: str | None) -> dict[str, str]:
    """Read flat ``KEY: value`` pairs; nested YAML is not supported."""
    if not path or not os.path.exists(path):
        return {}

    values: dict[str, str] = {}
    with open(path, encoding="utf-8") as handle:
        for line in handle:
            stripped = line.strip()
            if not stripped or stripped.startswith("#") or ":" not in stripped:
                continue
            key, raw_value = stripped.split(":", 1)
            key = key.strip()
            value = _parse_config_value(raw_value)
            if key and value:
                values[key] = value
    return values


def load_environment() -> None:
    global _CONFIG_FILE_PATH
    global _CONFIG_FILE_VALUES

    dotenv_path = _resolve_dotenv_path()
    if dotenv_path:
        load_dotenv(dotenv_path=dotenv_path, override=False)

    _CONFIG_FILE_PATH = _resolve_config_path()
    _CONFIG_FILE_VALUES = read_config_file(_CONFIG_FILE_PATH)

    # Real environment variables win over config.yaml
    for key in _CONFIG_KEYS:
        if key not in os.environ and key in _CONFIG_FILE_VALUES:
            os.environ[key] = _CONFIG_FILE_VALUES[key]


def get_config_path() -> str | None:
    return _CONFIG_FILE_PATH


def get_config_file_values() -> dict[str, str]:
    return dict(_CONFIG_FILE_VALUES)


def get_env_str(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


def get_statement_encoding() -> str:
    encoding = get_env_str("STATEMENT_ENCODING", DEFAULT_STATEMENT_ENCODING)
    try:
        "".encode(encoding)
    except LookupError:
        logger.warning(
            "[ENV] Unknown STATEMENT_ENCODING='%s', using default %s.",
            encoding,
            DEFAULT_STATEMENT_ENCODING,
        )
        return DEFAULT_STATEMENT_ENCODING
    return encoding


def log_environment() -> None:
    file_values = get_config_file_values()
    logger.info("[ENV] Config file: %s", get_config_path() or "<none>")
    for key in _CONFIG_KEYS:
        value = os.getenv(key)
        if value is None:
            logger.info("[ENV] %s=<unset>", key)
            continue
        source = "config" if file_values.get(key) == value else "env"
        logger.info("[ENV] %s=%s (%s)", key, value, source)


load_environment()
