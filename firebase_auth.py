import logging
from dataclasses import dataclass
from typing import Optional, Protocol

import requests

logger = logging.getLogger(__name__)

IDENTITY_TOOLKIT_URL = "https://identitytoolkit.googleapis.com/v1"

NETWORK_ERROR = "A network error (such as timeout, interrupted connection or unreachable host) has occurred."
INTERNAL_ERROR = "An internal error has occurred."

# Firebase REST 에러 코드 → 클라이언트 SDK 문구
ERROR_MESSAGES = {
    "EMAIL_EXISTS": "The email address is already in use by another account.",
    "INVALID_EMAIL": "The email address is badly formatted.",
    "MISSING_EMAIL": "Given String is empty or null",
    "MISSING_PASSWORD": "Given String is empty or null",
    "EMAIL_NOT_FOUND": "There is no user record corresponding to this identifier. The user may have been deleted.",
    "INVALID_PASSWORD": "The password is invalid or the user does not have a password.",
    "INVALID_LOGIN_CREDENTIALS": "The supplied auth credential is incorrect, malformed or has expired.",
    "USER_DISABLED": "The user account has been disabled by an administrator.",
    "OPERATION_NOT_ALLOWED": "This operation is not allowed. You must enable this service in the console.",
    "TOO_MANY_ATTEMPTS_TRY_LATER": "We have blocked all requests from this device due to unusual activity. Try again later.",
    "API_KEY_INVALID": "An internal error has occurred. [ API key not valid. Please pass a valid API key. ]",
}


@dataclass(frozen=True)
class AuthResult:
    ok: bool
    error: str = ""

    @classmethod
    def success(cls):
        return cls(ok=True)

    @classmethod
    def failure(cls, message):
        return cls(ok=False, error=message)


@dataclass(frozen=True)
class CurrentUser:
    uid: str
    email: Optional[str]
    id_token: str
    refresh_token: str


class IdentityProvider(Protocol):
    def is_logged_in(self) -> bool: ...
    def current_user_email(self) -> Optional[str]: ...
    def sign_out(self) -> None: ...
    def sign_in(self, email: str, password: str) -> AuthResult: ...
    def sign_up(self, email: str, password: str) -> AuthResult: ...


def describe_error(payload, status_code):
    """Firebase 에러 응답을 화면에 보여줄 문장으로 바꿉니다."""
    message = ""
    if isinstance(payload, dict):
        error = payload.get("error") or {}
        if isinstance(error, dict):
            message = str(error.get("message") or "")

    # 예: "WEAK_PASSWORD : Password should be at least 6 characters"
    code, _, detail = message.partition(" : ")
    code = code.strip()
    detail = detail.strip()

    if code == "WEAK_PASSWORD":
        return f"The given password is invalid. [ {detail or 'Password should be at least 6 characters'} ]"
    if code in ERROR_MESSAGES:
        return ERROR_MESSAGES[code]
    if message:
        return message
    return f"{INTERNAL_ERROR} [ HTTP {status_code} ]"


class FirebaseAuth:
    def __init__(self, api_key, emulator_host=None, timeout=10.0):
        self.api_key = api_key or "emulator"
        self.emulator_host = emulator_host
        self.timeout = timeout
        self.current_user = None

    @classmethod
    def from_settings(cls, settings):
        return cls(
            api_key=settings.firebase_api_key,
            emulator_host=settings.auth_emulator_host,
            timeout=settings.request_timeout,
        )

    def endpoint(self, method):
        if self.emulator_host:
            base = f"http://{self.emulator_host}/identitytoolkit.googleapis.com/v1"
        else:
            base = IDENTITY_TOOLKIT_URL
        return f"{base}/accounts:{method}"

    # ---------- 세션 조회 ----------
    def is_logged_in(self):
        return self.current_user is not None

    def current_user_email(self):
        if self.current_user is None:
            return None
        return self.current_user.email

    def sign_out(self):
        if self.current_user is not None:
            logger.info("Signed out uid=%s", self.current_user.uid)
        self.current_user = None

    # ---------- 로그인 / 회원가입 ----------
    def sign_in(self, email, password):
        return self._authenticate("signInWithPassword", email, password)

    def sign_up(self, email, password):
        # 가입에 성공하면 Firebase 가 바로 로그인 상태로 만들어 줌
        return self._authenticate("signUp", email, password)

    def _authenticate(self, method, email, password):
        payload = {"email": email, "password": password, "returnSecureToken": True}
        try:
            response = requests.post(
                self.endpoint(method),
                params={"key": self.api_key},
                json=payload,
                timeout=self.timeout,
            )
        except requests.Timeout:
            logger.warning("Firebase %s timed out after %.1fs", method, self.timeout)
            return AuthResult.failure(NETWORK_ERROR)
        except requests.RequestException as e:
            logger.warning("Firebase %s request failed: %s", method, type(e).__name__)
            return AuthResult.failure(NETWORK_ERROR)

        try:
            data = response.json()
        except ValueError:
            data = {}

        if not response.ok:
            message = describe_error(data, response.status_code)
            logger.warning("Firebase %s rejected (HTTP %s): %s", method, response.status_code, message)
            return AuthResult.failure(message)

        self.current_user = CurrentUser(
            uid=str(data.get("localId", "")),
            email=data.get("email") or email,
            id_token=str(data.get("idToken", "")),
            refresh_token=str(data.get("refreshToken", "")),
        )
        logger.info("Firebase %s succeeded for uid=%s", method, self.current_user.uid)
        return AuthResult.success()
