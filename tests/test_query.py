from urllib.parse import parse_qs, parse_qsl, urlsplit

import pytest

from commercetools import QueryInput, encode_query, urlencode_query

from _stubs import StubTransport, make_client


CASES = [
    (
        "where",
        QueryInput(where="not (name = 'Peter' and age < 42)"),
        {"where": ["not (name = 'Peter' and age < 42)"]},
        "where=not+%28name+%3D+%27Peter%27+and+age+%3C+42%29",
    ),
    (
        "sort",
        QueryInput(sort=["name desc", "dog.age asc"]),
        {"sort": ["name desc", "dog.age asc"]},
        "sort=name+desc&sort=dog.age+asc",
    ),
    ("expand", QueryInput(expand="taxCategory"), {"expand": ["taxCategory"]}, "expand=taxCategory"),
    ("limit", QueryInput(limit=20), {"limit": ["20"]}, "limit=20"),
    ("offset", QueryInput(offset=20), {"offset": ["20"]}, "offset=20"),
    ("with_total_false", QueryInput(with_total=False), {"withTotal": ["false"]}, "withTotal=false"),
    ("with_total_true", QueryInput(with_total=True), {"withTotal": ["true"]}, "withTotal=true"),
    ("with_total_none", QueryInput(with_total=None), {}, ""),
]


@pytest.mark.parametrize("input_,query,raw", [c[1:] for c in CASES], ids=[c[0] for c in CASES])
def test_query_input_in_request_url(input_, query, raw):
    transport = StubTransport(body={"limit": 20, "offset": 0, "count": 0, "results": []})
    client = make_client(transport)

    client.query("/tax-categories", input_)

    url = urlsplit(transport.requests[0].url)
    assert url.path == "/my-project/tax-categories"
    assert url.query == raw
    assert parse_qs(url.query) == query


def test_empty_query_encodes_nothing():
    assert encode_query(QueryInput()) == []
    assert encode_query(None) == []
    assert urlencode_query(None) == ""


def test_explicit_zero_paging_is_encoded():
    assert encode_query(QueryInput(limit=0, offset=0)) == [("limit", "0"), ("offset", "0")]


def test_empty_strings_are_treated_as_absent():
    assert encode_query(QueryInput(where="", expand="")) == []


def test_key_order_is_stable():
    q = QueryInput(with_total=True, offset=5, limit=10, expand="x", sort=["b", "a"], where="w")
    keys = [k for k, _ in encode_query(q)]
    assert keys == ["where", "sort", "sort", "expand", "limit", "offset", "withTotal"]


def test_negative_paging_rejected():
    with pytest.raises(ValueError):
        QueryInput(limit=-1)
    with pytest.raises(ValueError):
        QueryInput(offset=-5)


def test_round_trip_through_query_string():
    original = QueryInput(
        where='name(en = "Shirt")',
        sort=["createdAt desc", "id asc"],
        expand="productType",
        limit=0,
        offset=40,
        with_total=False,
    )
    parsed = QueryInput.from_params(parse_qsl(urlencode_query(original)))
    assert parsed == original


def test_from_params_rejects_bad_with_total():
    with pytest.raises(ValueError):
        QueryInput.from_params([("withTotal", "yes")])
