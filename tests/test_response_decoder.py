from __future__ import annotations

from typing import Any

import pytest
from pydantic import BaseModel

from core.domain.models import Post, User
from core.errors import DecodeError
from core.services.response_decoder import ResponseDecoder


class IdName(BaseModel):
    id: int
    name: str


class OnlyId(BaseModel):
    id: int


@pytest.fixture
def plain_decoder():
    return ResponseDecoder()


def test_decodes_into_requested_model(plain_decoder):
    result = plain_decoder.decode(IdName, b'{"id":1,"name":"Alice"}')
    assert result == IdName(id=1, name="Alice")


def test_type_mismatch_is_decode_error(plain_decoder):
    with pytest.raises(DecodeError) as info:
        plain_decoder.decode(OnlyId, b'{"id":"not-a-number"}')
    assert info.value.target == "OnlyId"


def test_numeric_strings_are_not_coerced(plain_decoder):
    with pytest.raises(DecodeError):
        plain_decoder.decode(OnlyId, b'{"id":"1"}')


def test_missing_field_is_decode_error(plain_decoder):
    with pytest.raises(DecodeError):
        plain_decoder.decode(IdName, b'{"id":1}')


@pytest.mark.parametrize("content", [b"", b"not json", b"{\"id\": 1"])
def test_invalid_json_is_decode_error(plain_decoder, content):
    with pytest.raises(DecodeError):
        plain_decoder.decode(OnlyId, content)


def test_decodes_lists(plain_decoder):
    users = plain_decoder.decode(
        list[User],
        b'[{"id":1,"name":"Leanne Graham","username":"Bret","email":"Sincere@april.biz",'
        b'"address":{"city":"Gwenborough"}}]',
    )
    assert len(users) == 1
    assert users[0].username == "Bret"


def test_decodes_aliases(plain_decoder):
    post = plain_decoder.decode(Post, b'{"userId":1,"id":101,"title":"t","body":"b"}')
    assert post.user_id == 1
    assert post.id == 101


def test_any_returns_plain_json(plain_decoder):
    assert plain_decoder.decode(Any, b'{"a":[1,2]}') == {"a": [1, 2]}
