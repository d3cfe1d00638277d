from dataclasses import dataclass

import streamlit as st

PASSWORD_MISMATCH = "Passwords do not match"

FORM_KEY = "login_form"
EMAIL_KEY = "auth_email"
PASSWORD_KEY = "auth_password"
CONFIRM_KEY = "auth_confirm_password"
SUBMIT_KEY = "auth_submit"
TOGGLE_KEY = "auth_toggle"


# ==========================================
# 📝 로그인 / 회원가입 폼 상태
# ==========================================
@dataclass
class LoginForm:
    email: str = ""
    password: str = ""
    confirm_password: str = ""
    sign_up: bool = False
    error: str = ""
    loading: bool = False
    pending: bool = False

    @property
    def title(self):
        return "Create Account" if self.sign_up else "Welcome Back"

    @property
    def submit_label(self):
        return "Sign Up" if self.sign_up else "Login"

    @property
    def toggle_label(self):
        if self.sign_up:
            return "Already have an account? Log in"
        return "Don't have an account? Sign up"

    @property
    def editable(self):
        return not self.loading

    def toggle_mode(self):
        # 이메일은 남기고 비밀번호만 비움
        self.sign_up = not self.sign_up
        self.error = ""
        self.password = ""
        self.confirm_password = ""

    def begin_submit(self):
        if self.loading:
            return False

        self.error = ""
        if self.sign_up and self.password != self.confirm_password:
            self.error = PASSWORD_MISMATCH
            return False

        self.loading = True
        self.pending = True
        return True

    def run_pending(self, provider, on_success):
        if not self.pending:
            return None

        # 요청은 한 번만 전송
        self.pending = False
        try:
            if self.sign_up:
                result = provider.sign_up(self.email, self.password)
            else:
                result = provider.sign_in(self.email, self.password)
        finally:
            self.loading = False

        if result.ok:
            on_success()
        else:
            self.error = result.error
        return result

    def submit(self, provider, on_success):
        if not self.begin_submit():
            return None
        return self.run_pending(provider, on_success)


# ==========================================
# 🛠️ 세션 상태 연결
# ==========================================
def get_login_form():
    if FORM_KEY not in st.session_state: st.session_state[FORM_KEY] = LoginForm()
    return st.session_state[FORM_KEY]


def reset_login_form():
    # 입력창 값은 화면이 바뀌면 Streamlit 이 알아서 정리함
    if FORM_KEY in st.session_state: del st.session_state[FORM_KEY]


def _pull_fields(form):
    form.email = st.session_state.get(EMAIL_KEY, form.email)
    form.password = st.session_state.get(PASSWORD_KEY, form.password)
    form.confirm_password = st.session_state.get(CONFIRM_KEY, "") if form.sign_up else ""


def _on_submit():
    form = get_login_form()
    _pull_fields(form)
    form.begin_submit()


def _on_toggle():
    form = get_login_form()
    if not form.editable:
        return
    _pull_fields(form)
    form.toggle_mode()
    st.session_state[PASSWORD_KEY] = form.password
    st.session_state[CONFIRM_KEY] = form.confirm_password


# ==========================================
# 🖥️ 화면 UI
# ==========================================
def login_ui(provider, on_login_success):
    form = get_login_form()
    disabled = not form.editable

    st.header(form.title)

    st.text_input("Email", key=EMAIL_KEY, disabled=disabled)
    st.text_input("Password", type="password", key=PASSWORD_KEY, disabled=disabled)
    if form.sign_up:
        st.text_input("Confirm Password", type="password", key=CONFIRM_KEY, disabled=disabled)

    st.button(
        form.submit_label,
        key=SUBMIT_KEY,
        type="primary",
        use_container_width=True,
        disabled=disabled,
        on_click=_on_submit,
    )
    st.button(form.toggle_label, key=TOGGLE_KEY, disabled=disabled, on_click=_on_toggle)

    if form.error:
        st.error(form.error)

    # 입력창이 잠긴 화면을 먼저 그린 뒤 요청 전송
    if form.pending:
        with st.spinner("Signing up..." if form.sign_up else "Signing in..."):
            form.run_pending(provider, on_login_success)
        st.rerun()
