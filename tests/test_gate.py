from datetime import timedelta
from types import SimpleNamespace

import pytest

from blog_api.core.errors import ExceptionCode, InvalidTokenError, LoginRequiredError, TokenExpiredError
from blog_api.core.tokens import TokenCodec
from blog_api.services.gate import GateRequest, RequestGate, extract_token, require_identity
from blog_api.services.session import SessionIssuer

from fakes import FakeClock, InMemoryAuthRecordStore, InMemoryUserStore

PATH = "/api/v1/users/me"
BYPASS = "/api/v1/auth/logout"


@pytest.fixture
def env():
    clock = FakeClock()
    codec = TokenCodec("gate-secret")
    records = InMemoryAuthRecordStore()
    users = InMemoryUserStore()
    user_id = users.create_with_profile(email="a@x.com", username="alice", password_hash="x", name="Alice")
    issuer = SessionIssuer(records, codec, clock=clock)
    gate = RequestGate(codec, records, users, bypass_paths=[BYPASS], clock=clock)

    return SimpleNamespace(
        clock=clock, codec=codec, records=records, users=users, user_id=user_id, issuer=issuer, gate=gate
    )


def bearer(token):
    return GateRequest(path=PATH, authorization=f"Bearer {token}")


def test_bypass_path_skips_everything_even_with_garbage(env):
    ctx = env.gate.authorize(GateRequest(path=BYPASS, authorization="Bearer garbage", cookie_token="junk"))
    assert ctx.bypassed
    assert ctx.identity is None
    assert env.records.touch_calls == 0


def test_no_token_is_anonymous(env):
    ctx = env.gate.authorize(GateRequest(path=PATH))
    assert not ctx.is_authenticated
    assert not ctx.bypassed


def test_valid_bearer_resolves_identity(env):
    session = env.issuer.issue(env.user_id)
    ctx = env.gate.authorize(bearer(session.access_token))

    assert ctx.identity.id == env.user_id
    assert ctx.identity.username == "alice"
    assert ctx.auth_id == session.auth_id


def test_cookie_takes_precedence_over_header(env):
    session = env.issuer.issue(env.user_id)
    ctx = env.gate.authorize(
        GateRequest(path=PATH, cookie_token=session.access_token, authorization="Bearer garbage")
    )
    assert ctx.identity.id == env.user_id


def test_scheme_is_case_insensitive():
    assert extract_token(GateRequest(path=PATH, authorization="bearer abc")) == "abc"
    assert extract_token(GateRequest(path=PATH, authorization="BEARER abc")) == "abc"


def test_non_bearer_header_is_treated_as_no_token(env):
    ctx = env.gate.authorize(GateRequest(path=PATH, authorization="Basic dXNlcjpwYXNz"))
    assert ctx.identity is None


def test_garbage_token_is_invalid(env):
    with pytest.raises(InvalidTokenError) as exc:
        env.gate.authorize(bearer("garbage"))
    assert exc.value.code == ExceptionCode.INVALID_TOKEN
    assert exc.value.status_code == 401


def test_expired_token_reports_token_expired(env):
    session = env.issuer.issue(env.user_id)
    token = env.codec.sign(
        auth_id=session.auth_id,
        user_id=env.user_id,
        issued_at=env.clock.now - timedelta(days=1),
        expires_at=env.clock.now - timedelta(seconds=1),
    )
    with pytest.raises(TokenExpiredError) as exc:
        env.gate.authorize(bearer(token))
    assert exc.value.code == ExceptionCode.TOKEN_EXPIRED


def test_missing_record_is_invalid(env):
    token = env.codec.sign(auth_id=999, user_id=env.user_id, issued_at=env.clock.now)
    with pytest.raises(InvalidTokenError):
        env.gate.authorize(bearer(token))


def test_expired_record_is_invalid_even_if_token_is_not(env):
    session = env.issuer.issue(env.user_id)
    token = env.codec.sign(
        auth_id=session.auth_id,
        user_id=env.user_id,
        issued_at=env.clock.now,
        expires_at=env.clock.now + timedelta(days=30),
    )
    env.clock.advance(days=7)
    with pytest.raises(InvalidTokenError) as exc:
        env.gate.authorize(bearer(token))
    assert exc.value.code == ExceptionCode.INVALID_TOKEN


def test_identity_comes_from_record_not_token_claim(env):
    other = env.users.create_with_profile(email="b@x.com", username="bob", password_hash="x", name="Bob")
    session = env.issuer.issue(env.user_id)
    forged_claim = env.codec.sign(auth_id=session.auth_id, user_id=other, issued_at=env.clock.now)

    ctx = env.gate.authorize(bearer(forged_claim))
    assert ctx.identity.id == env.user_id


def test_orphan_record_is_invalid(env):
    session = env.issuer.issue(env.user_id)
    env.users.delete(env.user_id)
    with pytest.raises(InvalidTokenError):
        env.gate.authorize(bearer(session.access_token))


def test_touch_is_debounced(env):
    session = env.issuer.issue(env.user_id)
    request = bearer(session.access_token)

    for _ in range(10):
        env.gate.authorize(request)
        env.clock.advance(seconds=20)
    # 200s dentro do intervalo de 5 minutos desde a emissão
    assert env.records.touch_calls == 0

    env.clock.advance(minutes=2)
    env.gate.authorize(request)
    env.gate.authorize(request)
    assert env.records.touch_calls == 1
    assert env.records.find_by_id(session.auth_id).last_validated_at == env.clock.now


def test_touch_boundary_is_strict(env):
    session = env.issuer.issue(env.user_id)
    env.clock.advance(minutes=5)
    env.gate.authorize(bearer(session.access_token))
    assert env.records.touch_calls == 0

    env.clock.advance(seconds=1)
    env.gate.authorize(bearer(session.access_token))
    assert env.records.touch_calls == 1


def test_touch_never_moves_timestamp_backwards(env):
    session = env.issuer.issue(env.user_id)
    later = env.clock.now + timedelta(minutes=10)
    env.records.touch(session.auth_id, later)
    env.records.touch(session.auth_id, env.clock.now + timedelta(minutes=6))
    assert env.records.find_by_id(session.auth_id).last_validated_at == later


def test_require_identity(env):
    with pytest.raises(LoginRequiredError) as exc:
        require_identity(env.gate.authorize(GateRequest(path=PATH)))
    assert exc.value.code == ExceptionCode.LOGIN_REQUIRED

    session = env.issuer.issue(env.user_id)
    assert require_identity(env.gate.authorize(bearer(session.access_token))).id == env.user_id
