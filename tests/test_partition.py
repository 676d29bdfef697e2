from kometa_studio.config.partition import partition_fields


def test_known_and_unknown_keys_are_split():
    raw = {"timeout": 60, "db_cache": 4096, "clean_bundles": False}
    known, extras = partition_fields(raw, ["timeout", "clean_bundles"])
    assert known == {"timeout": 60, "clean_bundles": False}
    assert extras == {"db_cache": 4096}


def test_secret_keys_are_dropped():
    raw = {"timeout": 60, "url": "http://localhost:32400", "token": "abc", "other": 1}
    known, extras = partition_fields(raw, ["timeout"], ["url", "token"])
    assert known == {"timeout": 60}
    assert extras == {"other": 1}
    assert "token" not in known and "url" not in known


def test_extras_absent_when_nothing_qualifies():
    known, extras = partition_fields({"timeout": 60, "token": "abc"}, ["timeout"], ["token"])
    assert known == {"timeout": 60}
    assert extras is None


def test_empty_input():
    known, extras = partition_fields({}, ["timeout"])
    assert known == {}
    assert extras is None


def test_values_are_not_type_checked():
    """Values pass through untouched, shape checks happen later."""
    raw = {"timeout": "sixty", "nested": {"a": [1, 2, None]}}
    known, extras = partition_fields(raw, ("timeout",))
    assert known["timeout"] == "sixty"
    assert extras["nested"] == {"a": [1, 2, None]}


def test_known_key_wins_over_secret_key():
    known, extras = partition_fields({"url": "x"}, ["url"], ["url"])
    assert known == {"url": "x"}
    assert extras is None


def test_input_is_not_mutated():
    raw = {"timeout": 60, "token": "abc", "other": 1}
    partition_fields(raw, ["timeout"], ["token"])
    assert raw == {"timeout": 60, "token": "abc", "other": 1}
