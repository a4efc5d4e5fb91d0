from __future__ import annotations

import pytest

from pankti_manager.auth.service import AuthService, AuthSession
from pankti_manager.core.constants import AUTH_SESSION_KEY
from pankti_manager.core.exceptions import AuthenticationError


def test_login_with_correct_pin_persists_flag():
    store: dict = {}
    session = AuthSession(store).load()

    AuthService.from_pin("1298").login("1298", session)

    assert session.is_authenticated
    assert store[AUTH_SESSION_KEY] is True


def test_load_restores_persisted_session():
    assert AuthSession({AUTH_SESSION_KEY: True}).load().is_authenticated
    assert not AuthSession({}).load().is_authenticated
    assert not AuthSession({AUTH_SESSION_KEY: "true"}).load().is_authenticated


@pytest.mark.parametrize("pin", ["0000", "", "12a8", " "])
def test_login_rejects_wrong_or_non_numeric_pin(pin):
    store: dict = {}
    session = AuthSession(store).load()

    with pytest.raises(AuthenticationError):
        AuthService.from_pin("1298").login(pin, session)
    assert not session.is_authenticated
    assert store == {}


def test_broken_pin_hash_fails_closed():
    with pytest.raises(AuthenticationError):
        AuthService("CHANGE_ME").login("1298", AuthSession({}))


def test_logout_clears_session():
    store = {AUTH_SESSION_KEY: True}
    session = AuthSession(store).load()

    AuthService.from_pin("1298").logout(session)

    assert not session.is_authenticated
    assert store == {}
