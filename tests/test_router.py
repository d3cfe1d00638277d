"""Tests for the session router transitions."""

from __future__ import annotations

import router
from fakes import FakeProvider
from router import AppState, SessionRouter


def test_sign_out_calls_provider_then_flips_flag() -> None:
    provider = FakeProvider(logged_in=True, email="user@example.com")
    state = AppState(logged_in=True)

    SessionRouter(provider, state).on_sign_out()

    assert provider.sign_outs == 1
    assert state.logged_in is False


def test_login_success_flips_flag_and_discards_form(monkeypatch) -> None:
    resets: list[bool] = []
    monkeypatch.setattr(router.auth, "reset_login_form", lambda: resets.append(True))
    state = AppState()

    SessionRouter(FakeProvider(), state).on_login_success()

    assert state.logged_in is True
    assert resets == [True]


def test_router_toggles_indefinitely(monkeypatch) -> None:
    monkeypatch.setattr(router.auth, "reset_login_form", lambda: None)
    provider = FakeProvider()
    state = AppState()
    r = SessionRouter(provider, state)

    for _ in range(3):
        r.on_login_success()
        assert state.logged_in is True
        r.on_sign_out()
        assert state.logged_in is False

    assert provider.sign_outs == 3
