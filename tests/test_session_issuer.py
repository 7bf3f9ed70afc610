from datetime import timedelta

from blog_api.core.tokens import TokenCodec
from blog_api.services.session import SessionIssuer

from fakes import FakeClock, InMemoryAuthRecordStore


def test_issue_creates_record_and_token_referencing_it():
    clock = FakeClock()
    records = InMemoryAuthRecordStore()
    codec = TokenCodec("issuer-secret")
    issuer = SessionIssuer(records, codec, clock=clock)

    session = issuer.issue(user_id=42)

    record = records.find_by_id(session.auth_id)
    assert record is not None
    assert record.user_id == 42
    assert record.created_at == clock.now
    assert record.last_validated_at == clock.now
    assert record.expires_at == clock.now + timedelta(days=7)
    assert session.expires_at == record.expires_at

    claims = codec.decode(session.access_token)
    assert claims.auth_id == record.id
    assert claims.user_id == 42


def test_each_signin_gets_its_own_record():
    records = InMemoryAuthRecordStore()
    issuer = SessionIssuer(records, TokenCodec("issuer-secret"), clock=FakeClock())

    first = issuer.issue(user_id=1)
    second = issuer.issue(user_id=1)

    assert first.auth_id != second.auth_id
    assert len(records.rows) == 2
