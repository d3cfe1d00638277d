import logging

import streamlit as st

import config
import firebase_auth as fb
from router import SessionRouter


def run_app(provider_factory=None):
    settings = config.load_settings()
    logging.basicConfig(level=settings.log_level, format='%(asctime)s - %(levelname)s - %(message)s')

    st.set_page_config(page_title=settings.app_title, page_icon="🔐", layout="centered")

    # 1. Firebase 연결 준비
    if provider_factory is None:
        if not settings.provider_configured:
            st.error("FIREBASE_API_KEY 가 없습니다. .streamlit/secrets.toml 또는 환경변수에 설정해주세요.")
            st.stop()
        provider_factory = lambda: fb.FirebaseAuth.from_settings(settings)

    # 2. 로그인 상태 체크 후 화면 선택
    SessionRouter.from_session(provider_factory).render()


if __name__ == "__main__":
    run_app()
