import json
from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional
from uuid import UUID

import pytest
from pydantic import BaseModel, Field

from restassured.models.settings import JsonSerializerSettings
from restassured.serialization import deserialize_json, serialize_json


class Post(BaseModel):
    id: int = Field(alias="Id")
    title: str = Field(alias="Title")
    published: date = Field(alias="Date")
    tags: list[str] = Field(default_factory=list, alias="Tags")
    summary: Optional[str] = Field(default=None, alias="Summary")


@dataclass
class Author:
    name: str
    born: datetime


class TestSerializeJson:
    def test_custom_date_format_produces_exact_payload(self):
        post = {
            "Id": 1,
            "Title": "My post title",
            "Date": datetime(1999, 12, 31, 23, 59, 59),
        }

        payload = serialize_json(post, JsonSerializerSettings(date_format="%Y-%m-%d"))

        assert payload == '{"Id":1,"Title":"My post title","Date":"1999-12-31"}'

    def test_dates_default_to_iso_format(self):
        payload = serialize_json({"Date": datetime(1999, 12, 31, 23, 59, 59)})

        assert payload == '{"Date":"1999-12-31T23:59:59"}'

    def test_model_is_serialized_by_alias(self):
        post = Post(Id=1, Title="My post title", Date=date(1999, 12, 31))

        payload = json.loads(serialize_json(post))

        assert payload == {
            "Id": 1,
            "Title": "My post title",
            "Date": "1999-12-31",
            "Tags": [],
            "Summary": None,
        }

    def test_exclude_none(self):
        post = Post(Id=1, Title="t", Date=date(1999, 12, 31))

        payload = json.loads(
            serialize_json(post, JsonSerializerSettings(exclude_none=True))
        )

        assert "Summary" not in payload

    def test_dataclass_with_date_format(self):
        author = Author(name="Bas", born=datetime(1980, 5, 17, 8, 30))

        payload = serialize_json(author, JsonSerializerSettings(date_format="%d-%m-%Y"))

        assert payload == '{"name":"Bas","born":"17-05-1980"}'

    def test_indent_and_sort_keys(self):
        payload = serialize_json(
            {"b": 1, "a": 2}, JsonSerializerSettings(indent=2, sort_keys=True)
        )

        assert payload == '{\n  "a": 2,\n  "b": 1\n}'

    def test_values_pydantic_understands_are_rendered(self):
        payload = serialize_json({"id": UUID("12345678-1234-5678-1234-567812345678")})

        assert payload == '{"id":"12345678-1234-5678-1234-567812345678"}'

    def test_unknown_objects_raise_type_error(self):
        class Opaque:
            pass

        with pytest.raises(TypeError):
            serialize_json({"value": Opaque()})


class TestDeserializeJson:
    def test_round_trip_model(self):
        post = Post(Id=1, Title="My post title", Date=date(1999, 12, 31), Tags=["a", "b"])

        assert deserialize_json(serialize_json(post), Post) == post

    def test_round_trip_with_custom_date_format(self):
        settings = JsonSerializerSettings(date_format="%Y-%m-%d")
        post = Post(Id=2, Title="Another", Date=date(2020, 2, 29))

        assert deserialize_json(serialize_json(post, settings), Post, settings) == post

    def test_without_target_type_returns_plain_values(self):
        assert deserialize_json(b'{"a":[1,2]}') == {"a": [1, 2]}

    def test_strict_mode_rejects_coercion(self):
        with pytest.raises(ValueError):
            deserialize_json(b'{"Id":"1","Title":"t","Date":"1999-12-31"}', Post, JsonSerializerSettings(strict=True))

    def test_invalid_json_raises_value_error(self):
        with pytest.raises(ValueError):
            deserialize_json(b"{not json", dict)
