"""
Round-trip tests: parse -> generate -> parse must not lose information.

Known limitations: comments, key order and whitespace of the input are not
kept, and secrets move to the profile instead of staying in the config.
"""
from pathlib import Path

import pytest
import yaml

from kometa_studio.config import extract_secrets_from_yaml, generate_yaml, parse_kometa_yaml

FIXTURES = Path(__file__).parent / "fixtures" / "kometa"

KNOWN_FIELDS_ONLY = """
settings:
  cache: true
  cache_expiration: 60
  asset_directory:
    - config/assets
    - config/more_assets
  sync_mode: sync
  playlist_sync_to_users: all

plex:
  timeout: 60
  clean_bundles: false

tmdb:
  language: en
  region: US

mdblist:
  cache_expiration: 60

sonarr:
  add_missing: true
  root_folder_path: /tv
  monitor: future
  series_type: anime
  tag:
    - kometa

libraries:
  Movies:
    schedule: weekly(sunday)
    collection_files:
      - default: imdb
      - default: tmdb
    overlay_files:
      - default: resolution
        template_variables:
          use_4k: true
          use_1080p: true
      - default: audio_codec
        template_variables:
          use_atmos: true
  TV Shows:
    library_name: Series
    overlay_files:
      - default: status
        template_variables:
          back_color_airing: "#016920"
    operations:
      assets_for_all: true
"""


def _roundtrip(config, preserve_extras=True):
    generated = generate_yaml(config, mode="template", include_comment=False)
    return parse_kometa_yaml(generated, preserve_extras=preserve_extras)


def test_roundtrip_known_fields_is_lossless():
    config = parse_kometa_yaml(KNOWN_FIELDS_ONLY)
    assert _roundtrip(config) == config


def test_roundtrip_keeps_comment_banner_harmless():
    config = parse_kometa_yaml(KNOWN_FIELDS_ONLY)
    generated = generate_yaml(config, mode="template", include_comment=True)
    assert parse_kometa_yaml(generated) == config


def test_roundtrip_fixture_with_extras():
    config = parse_kometa_yaml((FIXTURES / "config.yml").read_text())
    assert _roundtrip(config) == config


def test_roundtrip_preserves_duplicate_overlays():
    text = """
libraries:
  Movies:
    overlay_files:
      - default: studio
        template_variables:
          builder_level: movie
      - default: studio
        template_variables:
          builder_level: collection
"""
    reparsed = _roundtrip(parse_kometa_yaml(text))
    overlays = reparsed["libraries"]["Movies"]["overlay_files"]

    assert len(overlays) == 2
    assert overlays[0]["template_variables"] == {"builder_level": "movie"}
    assert overlays[1]["template_variables"] == {"builder_level": "collection"}


@pytest.mark.parametrize(
    "text, path, expected",
    [
        ("custom_top_level_key: some_value\nsettings:\n  cache: true\n", ("extras", "custom_top_level_key"), "some_value"),
        ("settings:\n  experimental_feature: true\n", ("settings", "extras", "experimental_feature"), True),
        ("plex:\n  db_cache: 4096\n", ("plex", "extras", "db_cache"), 4096),
        (
            "libraries:\n  Movies:\n    custom_library_key:\n      nested: [1, 2]\n",
            ("libraries", "Movies", "extras", "custom_library_key"),
            {"nested": [1, 2]},
        ),
    ],
)
def test_roundtrip_preserves_extras_at_every_level(text, path, expected):
    reparsed = _roundtrip(parse_kometa_yaml(text))
    node = reparsed
    for key in path:
        node = node[key]
    assert node == expected


def test_full_mode_roundtrip_recovers_secrets():
    text = (FIXTURES / "config.yml").read_text()
    config = parse_kometa_yaml(text)
    secrets = extract_secrets_from_yaml(text)

    generated = generate_yaml(config, secrets, mode="full")

    assert extract_secrets_from_yaml(generated) == secrets
    assert parse_kometa_yaml(generated) == config


def test_template_output_has_no_secrets():
    text = (FIXTURES / "config.yml").read_text()
    generated = generate_yaml(parse_kometa_yaml(text), mode="template")
    assert extract_secrets_from_yaml(generated) == {}


def test_edits_to_config_survive_roundtrip():
    config = parse_kometa_yaml(KNOWN_FIELDS_ONLY)
    config["plex"] = {**config["plex"], "timeout": 120}
    config["libraries"]["Movies"]["collection_files"].append({"default": "trakt"})

    reparsed = _roundtrip(config)

    assert reparsed["plex"]["timeout"] == 120
    assert reparsed["libraries"]["Movies"]["collection_files"][-1] == {"default": "trakt"}


def test_disabled_block_in_document_survives_roundtrip():
    text = "plex:\n  enabled: false\n  timeout: 60\n  db_cache: 4096\n"
    config = parse_kometa_yaml(text)

    generated = generate_yaml(config, mode="template", include_comment=False)

    assert yaml.safe_load(generated) == {"plex": {"timeout": 60, "enabled": False, "db_cache": 4096}}
    assert parse_kometa_yaml(generated) == config


def test_numeric_secret_full_roundtrip():
    text = "tmdb:\n  apikey: 1234567890123456\n  language: en\n"
    secrets = extract_secrets_from_yaml(text)

    generated = generate_yaml(parse_kometa_yaml(text), secrets, mode="full")

    assert extract_secrets_from_yaml(generated) == {"tmdb": {"apikey": "1234567890123456"}}
