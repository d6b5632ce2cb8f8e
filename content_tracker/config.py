import os
from dataclasses import dataclass
from pathlib import Path

from content_tracker.adapters.webhook import REQUEST_TIMEOUT


def load_dotenv(path: Path) -> None:
    if not path.exists():
        return

    for raw in path.read_text().splitlines():
        line = raw.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue

        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key and key not in os.environ:
            os.environ[key] = value


def required_env(name: str) -> str:
    value = os.getenv(name, "").strip()
    if not value:
        raise RuntimeError(f"Missing required environment variable: {name}")
    return value


def parse_timeout(raw: str) -> float:
    try:
        timeout = float(raw)
    except ValueError as exc:
        raise RuntimeError("CONTENT_TRACKER_TIMEOUT must be a number of seconds") from exc

    if timeout <= 0:
        raise RuntimeError("CONTENT_TRACKER_TIMEOUT must be positive")
    return timeout


@dataclass(frozen=True)
class Settings:
    webhook_url: str
    timeout: float
    log_level: str


def load_settings(env_file: Path = Path(".env")) -> Settings:
    load_dotenv(env_file)
    return Settings(
        webhook_url=required_env("CONTENT_TRACKER_WEBHOOK_URL"),
        timeout=parse_timeout(os.getenv("CONTENT_TRACKER_TIMEOUT", str(REQUEST_TIMEOUT))),
        log_level=os.getenv("CONTENT_TRACKER_LOG_LEVEL", "INFO").strip().upper() or "INFO",
    )
