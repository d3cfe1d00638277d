import os
from dataclasses import dataclass
from typing import Optional

import streamlit as st

# ==========================================
# ⚙️ 설정 로딩 (secrets.toml → 환경변수 순서)
# ==========================================
DEFAULT_TIMEOUT = 10.0
DEFAULT_TITLE = "Login App"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    firebase_api_key: Optional[str]
    auth_emulator_host: Optional[str]
    request_timeout: float
    log_level: str
    app_title: str

    @property
    def provider_configured(self) -> bool:
        # 에뮬레이터는 아무 키나 받아줌
        return bool(self.firebase_api_key or self.auth_emulator_host)


def get_secret(name, default=""):
    try:
        if name in st.secrets:
            return str(st.secrets[name])
    except FileNotFoundError:
        # secrets.toml 이 없는 로컬 환경
        pass
    return os.getenv(name, default)


def _parse_timeout(raw):
    try:
        value = float(str(raw).strip() or DEFAULT_TIMEOUT)
    except ValueError:
        return DEFAULT_TIMEOUT
    return max(value, 1.0)


def _parse_level(raw):
    level = (raw or "").strip().upper()
    return level if level in LOG_LEVELS else "INFO"


def load_settings() -> Settings:
    return Settings(
        firebase_api_key=(get_secret("FIREBASE_API_KEY") or "").strip() or None,
        auth_emulator_host=(get_secret("FIREBASE_AUTH_EMULATOR_HOST") or "").strip() or None,
        request_timeout=_parse_timeout(get_secret("AUTH_REQUEST_TIMEOUT", str(DEFAULT_TIMEOUT))),
        log_level=_parse_level(get_secret("LOG_LEVEL", "INFO")),
        app_title=(get_secret("APP_TITLE", DEFAULT_TITLE) or "").strip() or DEFAULT_TITLE,
    )
