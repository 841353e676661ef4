import json
from datetime import datetime, timezone
from typing import List, Optional

import pytest

from apiclients.core.exceptions import DecodeError, EncodeError
from apiclients.core.marshal import ApiModel, coerce_body, decode_body, decode_value, encode_body
from apiclients.gusto.models import Garnishment, PostEmployeesEmployeeIdGarnishmentsRequest
from apiclients.okta.models import UserFactor, VerifyFactorRequest


class Widget(ApiModel):
    name: str
    size: int
    note: Optional[str] = None


def test_encode_uses_wire_names_and_drops_none():
    factor = UserFactor(factor_type="sms", provider="OKTA", profile={"phoneNumber": "+1-555-0100"})
    data = json.loads(encode_body(factor))
    assert data == {"factorType": "sms", "provider": "OKTA", "profile": {"phoneNumber": "+1-555-0100"}}


def test_encode_list_of_models():
    assert json.loads(encode_body([Widget(name="a", size=1)])) == [{"name": "a", "size": 1}]


def test_encode_rejects_unserializable_value():
    with pytest.raises(EncodeError):
        encode_body({"when": object()})


def test_roundtrip_preserves_every_field():
    factor = UserFactor(
        id="ufs1",
        factor_type="token:software:totp",
        provider="GOOGLE",
        status="ACTIVE",
        created=datetime(2024, 5, 1, 12, 30, tzinfo=timezone.utc),
        verify=VerifyFactorRequest(pass_code="123456"),
        links={"self": {"href": "https://example.okta.com/api/v1/users/u1/factors/ufs1"}},
    )
    assert decode_body(encode_body(factor), UserFactor) == factor


def test_roundtrip_snake_case_model():
    garnishment = Garnishment(id="g1", amount="150.00", court_ordered=True, times=12, annual_maximum="1800.00")
    assert decode_body(encode_body(garnishment), Garnishment) == garnishment


def test_decode_accepts_python_names_and_ignores_unknown_fields():
    factor = decode_body(b'{"factor_type": "push", "brandNewField": 1}', UserFactor)
    assert factor.factor_type == "push"


def test_decode_list():
    widgets = decode_body(b'[{"name": "a", "size": 1}, {"name": "b", "size": 2}]', List[Widget])
    assert [w.name for w in widgets] == ["a", "b"]


def test_decode_none_type_ignores_body():
    assert decode_body(b"", None) is None
    assert decode_body(b'{"anything": true}', None) is None


@pytest.mark.parametrize(
    "content",
    [
        b'{"size": 1}',  # missing required field
        b'{"name": "a", "size": "large"}',  # wrong type
        b"not json",
        b"[]",  # array where an object is expected
    ],
)
def test_decode_shape_mismatch_raises(content):
    with pytest.raises(DecodeError):
        decode_body(content, Widget)


def test_decode_empty_body_for_typed_response_raises():
    with pytest.raises(DecodeError, match="Empty body"):
        decode_body(b"", Widget)


def test_decode_error_carries_url():
    with pytest.raises(DecodeError) as excinfo:
        decode_body(b"{}", Widget, url="https://api.example.com/w")
    assert excinfo.value.url == "https://api.example.com/w"
    assert "https://api.example.com/w" in str(excinfo.value)


def test_decode_value_from_parsed_json():
    assert decode_value({"name": "a", "size": 3}, Widget) == Widget(name="a", size=3)


class TestCoerceBody:
    def test_instance_passes_through(self):
        body = Widget(name="a", size=1)
        assert coerce_body(body, Widget) is body

    def test_dict_is_validated(self):
        body = coerce_body({"amount": "10.00", "description": "Loan", "court_ordered": False},
                           PostEmployeesEmployeeIdGarnishmentsRequest)
        assert body.amount == "10.00"

    def test_invalid_dict_raises_encode_error(self):
        with pytest.raises(EncodeError):
            coerce_body({"description": "no amount"}, PostEmployeesEmployeeIdGarnishmentsRequest)
