import logging
from dataclasses import dataclass

import streamlit as st

import auth
import welcome
from firebase_auth import IdentityProvider

logger = logging.getLogger(__name__)

APP_STATE_KEY = "app_state"
PROVIDER_KEY = "auth_provider"
UNKNOWN_EMAIL = "Unknown"


@dataclass
class AppState:
    logged_in: bool = False


# ==========================================
# 🔀 세션 라우터 (로그인 화면 ↔ 환영 화면)
# ==========================================
class SessionRouter:
    """
    로그인 여부만 보고 어떤 화면을 그릴지 결정합니다.
    로그인 플래그는 이 클래스의 콜백에서만 바뀝니다.
    """

    def __init__(self, provider: IdentityProvider, state: AppState):
        self.provider = provider
        self.state = state

    @classmethod
    def from_session(cls, provider_factory):
        # provider 는 브라우저 세션당 하나
        if PROVIDER_KEY not in st.session_state:
            st.session_state[PROVIDER_KEY] = provider_factory()
        provider = st.session_state[PROVIDER_KEY]

        if APP_STATE_KEY not in st.session_state:
            st.session_state[APP_STATE_KEY] = AppState(logged_in=provider.is_logged_in())
        return cls(provider, st.session_state[APP_STATE_KEY])

    def on_login_success(self):
        self.state.logged_in = True
        auth.reset_login_form()
        logger.info("Session switched to logged-in")

    def on_sign_out(self):
        self.provider.sign_out()
        self.state.logged_in = False
        logger.info("Session switched to logged-out")

    def render(self):
        if self.state.logged_in:
            email = self.provider.current_user_email() or UNKNOWN_EMAIL
            welcome.welcome_ui(email, on_sign_out=self.on_sign_out)
        else:
            auth.login_ui(self.provider, on_login_success=self.on_login_success)
