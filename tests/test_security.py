"""Tests for access token signing and verification."""

import time

import pytest
from fastapi import HTTPException

from clean_co_api.app.core import security
from clean_co_api.app.core.security import (
    Unauthorized,
    authorize_booking_listing,
    create_access_token,
    decode_access_token,
    verify_token,
)


class TestVerifyToken:
    def test_round_trip_returns_claim(self) -> None:
        claim = {"email": "a@x.com", "name": "Ann", "roles": ["customer"]}
        token = create_access_token(claim)
        assert verify_token(token) == claim

    def test_payload_carries_one_hour_expiry(self) -> None:
        before = int(time.time())
        payload = decode_access_token(create_access_token({"email": "a@x.com"}))
        assert payload is not None
        assert before + 3600 <= payload["exp"] <= int(time.time()) + 3600

    def test_missing_token(self) -> None:
        with pytest.raises(Unauthorized) as exc:
            verify_token(None)
        assert exc.value.reason == "missing token"

    def test_empty_token_counts_as_missing(self) -> None:
        with pytest.raises(Unauthorized) as exc:
            verify_token("")
        assert exc.value.reason == "missing token"

    def test_missing_token_skips_signature_check(self, monkeypatch) -> None:
        calls = []
        monkeypatch.setattr(security, "decode_access_token", lambda *a: calls.append(a))
        with pytest.raises(Unauthorized):
            verify_token(None)
        assert calls == []

    def test_wrong_secret_rejected(self) -> None:
        token = create_access_token({"email": "a@x.com"}, secret="another-secret")
        with pytest.raises(Unauthorized) as exc:
            verify_token(token)
        assert exc.value.reason == "invalid token"

    def test_expired_token_rejected(self) -> None:
        token = create_access_token({"email": "a@x.com"}, expires_delta=-1)
        with pytest.raises(Unauthorized) as exc:
            verify_token(token)
        assert exc.value.reason == "invalid token"

    def test_expired_after_lifetime(self, monkeypatch) -> None:
        token = create_access_token({"email": "a@x.com"})
        issued = time.time()
        monkeypatch.setattr(security.time, "time", lambda: issued + 3601)
        with pytest.raises(Unauthorized):
            verify_token(token)

    @pytest.mark.parametrize("token", ["garbage", "a.b", "a.b.c", "a.b.c.d", "é.é.é"])
    def test_malformed_token_rejected(self, token: str) -> None:
        with pytest.raises(Unauthorized) as exc:
            verify_token(token)
        assert exc.value.reason == "invalid token"

    def test_tampered_payload_rejected(self) -> None:
        header, _, signature = create_access_token({"email": "a@x.com"}).split(".")
        forged = create_access_token({"email": "b@y.com"}).split(".")[1]
        with pytest.raises(Unauthorized):
            verify_token(f"{header}.{forged}.{signature}")

    def test_reserved_claim_refused_at_issue(self) -> None:
        with pytest.raises(ValueError):
            create_access_token({"email": "a@x.com", "exp": 1})


class TestAuthorizeBookingListing:
    def test_matching_email_passes(self) -> None:
        assert authorize_booking_listing("a@x.com", {"email": "a@x.com"}) == "a@x.com"

    def test_other_email_forbidden(self) -> None:
        with pytest.raises(HTTPException) as exc:
            authorize_booking_listing("b@y.com", {"email": "a@x.com"})
        assert exc.value.status_code == 403
        assert exc.value.detail == "forbidden access"

    def test_missing_query_email_forbidden_for_token_with_email(self) -> None:
        with pytest.raises(HTTPException) as exc:
            authorize_booking_listing(None, {"email": "a@x.com"})
        assert exc.value.status_code == 403

    def test_no_email_on_either_side_passes_unfiltered(self) -> None:
        assert authorize_booking_listing(None, {"name": "anonymous"}) is None
