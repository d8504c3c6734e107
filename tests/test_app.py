# tests/test_app.py
"""
HTTP tests for the explorer pages through the Flask test client.
"""

import pytest

from app import InputRejected, check_bound, create_app, parse_int_expr


@pytest.fixture
def client():
    app = create_app({"TESTING": True, "MAX_SCAN_BOUND": 50, "MAX_MODULUS": 12})
    with app.test_client() as client:
        yield client


# ---------- expression parsing ------------------------------------------------


@pytest.mark.parametrize("expr, expected", [
    ("29", 29),
    ("(5*6)-1", 29),
    ("2^10 - 1", 1023),
    ("2**5", 32),
    ("7/2", 3),
    ("7 % 4", 3),
    ("-3 + 5", 2),
])
def test_parse_int_expr(expr, expected):
    assert parse_int_expr(expr) == expected


@pytest.mark.parametrize("expr", ["", "   ", "1.5", "abc", "2 +", "1/0", "5 % 0",
                                  "2^100000", "10^5000", "True", "__import__('os')",
                                  "*".join(["(1000^4096)"] * 200), "(2^30000) * (2^30000) * (2^30000)",
                                  " + ".join(["(2^32768)*(2^32766)"] * 4)])
def test_parse_int_expr_rejects(expr):
    with pytest.raises(InputRejected):
        parse_int_expr(expr)


def test_check_bound():
    assert check_bound(5, 10, "n") == 5
    with pytest.raises(InputRejected, match="negative"):
        check_bound(-1, 10, "n")
    with pytest.raises(InputRejected, match="at most 10"):
        check_bound(11, 10, "n")


def test_check_bound_huge_values_are_described_by_size():
    with pytest.raises(InputRejected, match="40820-bit number"):
        check_bound(1000 ** 4096, 10, "n")
    with pytest.raises(InputRejected, match="must not be negative, got a 40820-bit number"):
        check_bound(-(1000 ** 4096), 10, "n")


def test_parse_int_expr_allows_numbers_up_to_the_size_cap():
    assert parse_int_expr("1000^4096").bit_length() == 40820
    assert parse_int_expr("(2^30000) * (2^30000)") == 2 ** 60000


# ---------- index / primality -------------------------------------------------


def test_index_get(client):
    res = client.get("/")
    assert res.status_code == 200
    assert b"Number Theory Explorer" in res.data
    assert b"max 50" in res.data


def test_index_prime(client):
    res = client.post("/", data={"number": "2^5-1"})
    assert res.status_code == 200
    assert b"31 is prime. The next prime is 37." in res.data


def test_index_composite(client):
    res = client.post("/", data={"number": "100"})
    assert b"100 is not prime. The next prime is 101." in res.data


@pytest.mark.parametrize("number", ["", "abc", "-7"])
def test_index_errors_inline(client, number):
    res = client.post("/", data={"number": number})
    assert res.status_code == 200
    assert b"Error:" in res.data


def test_index_huge_number_is_rejected_inline(client):
    res = client.post("/", data={"number": "1000^4096"})
    assert res.status_code == 200
    assert b"Error: Number must be at most 1000000000000, got a 40820-bit number" in res.data


def test_factorization_form_rejects_huge_number(client):
    res = client.get("/integer_factorization", query_string={"number": "1000^4096"})
    assert res.status_code == 400
    assert b"40820-bit number" in res.data


def test_residue_form_rejects_huge_negative_number(client):
    res = client.get("/residue_class", query_string={"modulus": "-(1000^4096)"})
    assert res.status_code == 400
    assert b"must not be negative" in res.data


# ---------- euclidean algorithm -----------------------------------------------


def test_euclidean_page(client):
    res = client.get("/euclidian_algorithm/54/24")
    assert res.status_code == 200
    assert b"gcd(54, 24) = <strong>6</strong>" in res.data
    assert b"54 = 2 \xc2\xb7 24 + 6" in res.data


def test_euclidean_page_zero(client):
    res = client.get("/euclidian_algorithm/7/0")
    assert res.status_code == 200
    assert b"<strong>7</strong>" in res.data
    assert b"No division needed" in res.data


def test_euclidean_negative_path_is_not_found(client):
    assert client.get("/euclidian_algorithm/-1/3").status_code == 404


def test_euclidean_form_redirects(client):
    res = client.get("/euclidian_algorithm", query_string={"a": "2*27", "b": "24"})
    assert res.status_code == 302
    assert res.headers["Location"].endswith("/euclidian_algorithm/54/24")


def test_euclidean_form_rejects_garbage(client):
    res = client.get("/euclidian_algorithm", query_string={"a": "x", "b": "24"})
    assert res.status_code == 400
    assert b"Error:" in res.data


# ---------- worst case --------------------------------------------------------


def test_worst_case_page(client):
    res = client.get("/euclidian_algorithm_worst_case/10")
    assert res.status_code == 200
    assert b"<strong>(8, 5)</strong>" in res.data
    assert b"<strong>4</strong> steps" in res.data
    assert b"/euclidian_algorithm/5/3" in res.data


def test_worst_case_above_bound(client):
    res = client.get("/euclidian_algorithm_worst_case/51")
    assert res.status_code == 400
    assert b"at most 50" in res.data


def test_worst_case_form_redirects(client):
    res = client.get("/euclidian_algorithm_worst_case", query_string={"upper": "20"})
    assert res.status_code == 302
    assert res.headers["Location"].endswith("/euclidian_algorithm_worst_case/20")


# ---------- factorization -----------------------------------------------------


def test_factorization_page(client):
    res = client.get("/integer_factorization/360")
    assert res.status_code == 200
    text = res.get_data(as_text=True)
    assert "2 · 2 · 2 · 3 · 3 · 5" in text
    assert "2<sup>3</sup>" in text


def test_factorization_of_one(client):
    res = client.get("/integer_factorization/1")
    assert b"has no prime factors" in res.data


def test_factorization_above_bound(client):
    assert client.get(f"/integer_factorization/{10**12 + 1}").status_code == 400


def test_factorization_form_redirects(client):
    res = client.get("/integer_factorization", query_string={"number": "2^10 - 1"})
    assert res.status_code == 302
    assert res.headers["Location"].endswith("/integer_factorization/1023")


# ---------- residue classes ---------------------------------------------------


def test_residue_page(client):
    res = client.get("/residue_class/5")
    assert res.status_code == 200
    text = res.get_data(as_text=True)
    assert "5 is prime." in text
    assert "Primes up to 5: 2, 3, 5" in text
    assert "+ mod 5" in text
    assert "· mod 5" in text


def test_residue_page_composite(client):
    assert b"6 is not prime." in client.get("/residue_class/6").data


@pytest.mark.parametrize("path", ["/residue_class/0", "/residue_class/13"])
def test_residue_page_rejects(client, path):
    assert client.get(path).status_code == 400


def test_residue_form_rejects_negative(client):
    res = client.get("/residue_class", query_string={"modulus": "-3"})
    assert res.status_code == 400
    assert b"must not be negative" in res.data


def test_residue_form_redirects(client):
    res = client.get("/residue_class", query_string={"modulus": "3+4"})
    assert res.status_code == 302
    assert res.headers["Location"].endswith("/residue_class/7")
