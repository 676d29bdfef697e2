"""
Declarative table of the sections a Kometa config is made of.

Each top-level block (settings and every external-service integration) is
described by a SectionSpec listing the keys the editor understands, the keys
holding credentials that belong to a profile instead of the config, and how
the block decides whether it is enabled. The parser, the secrets extractor
and the generator all read this table; adding an integration is a matter of
adding an entry here.
"""
from dataclasses import dataclass, field
from typing import Dict, Literal, Optional, Tuple

Enablement = Literal["opt_out", "opt_in"]


@dataclass(frozen=True)
class SectionSpec:
    """Known, secret and credential keys of one config block.

    Attributes:
        name: Top-level key of the block
        known_keys: Keys kept as typed fields, in emission order
        secret_keys: Keys moved to the profile and never kept in the config
        credential_keys: Secret keys that are masked in masked mode
        nested_secret_keys: Secret keys whose value is a mapping of credentials
        enablement: None for blocks without an enabled flag, "opt_out" when the
            block renders unless disabled, "opt_in" when it renders only if enabled
    """

    name: str
    known_keys: Tuple[str, ...]
    secret_keys: Tuple[str, ...] = ()
    credential_keys: Tuple[str, ...] = ()
    nested_secret_keys: Dict[str, Tuple[str, ...]] = field(default_factory=dict)
    enablement: Optional[Enablement] = None

    @property
    def has_enabled_flag(self) -> bool:
        return self.enablement is not None

    def is_rendered(self, enabled: Optional[bool]) -> bool:
        """Whether a block with the given enabled flag is written out."""
        if self.enablement == "opt_out":
            return enabled is not False
        if self.enablement == "opt_in":
            return enabled is True
        return True


SETTINGS_SPEC = SectionSpec(
    name="settings",
    known_keys=(
        "cache",
        "cache_expiration",
        "asset_directory",
        "asset_folders",
        "asset_depth",
        "create_asset_folders",
        "prioritize_assets",
        "dimensional_asset_rename",
        "download_url_assets",
        "show_missing_assets",
        "show_missing_season_assets",
        "show_missing_episode_assets",
        "show_asset_not_needed",
        "sync_mode",
        "default_collection_order",
        "delete_below_minimum",
        "delete_not_scheduled",
        "run_again_delay",
        "missing_only_released",
        "show_unmanaged",
        "show_filtered",
        "show_options",
        "show_missing",
        "only_filter_missing",
        "save_report",
        "tvdb_language",
        "ignore_ids",
        "ignore_imdb_ids",
        "item_refresh_delay",
        "playlist_sync_to_users",
        "playlist_exclude_users",
        "playlist_report",
        "verify_ssl",
        "custom_repo",
        "check_nightly",
        "run_order",
    ),
)

PLEX_SPEC = SectionSpec(
    name="plex",
    known_keys=("timeout", "clean_bundles", "empty_trash", "optimize"),
    secret_keys=("url", "token"),
    credential_keys=("token",),
    enablement="opt_out",
)

TMDB_SPEC = SectionSpec(
    name="tmdb",
    known_keys=("cache_expiration", "language", "region"),
    secret_keys=("apikey",),
    credential_keys=("apikey",),
    enablement="opt_out",
)

TAUTULLI_SPEC = SectionSpec(
    name="tautulli",
    known_keys=(),
    secret_keys=("url", "apikey"),
    credential_keys=("apikey",),
    enablement="opt_in",
)

MDBLIST_SPEC = SectionSpec(
    name="mdblist",
    known_keys=("cache_expiration",),
    secret_keys=("apikey",),
    credential_keys=("apikey",),
    enablement="opt_in",
)

RADARR_SPEC = SectionSpec(
    name="radarr",
    known_keys=(
        "add_missing",
        "add_existing",
        "upgrade_existing",
        "monitor_existing",
        "ignore_cache",
        "root_folder_path",
        "monitor",
        "availability",
        "quality_profile",
        "tag",
        "search",
    ),
    secret_keys=("url", "token"),
    credential_keys=("token",),
    enablement="opt_in",
)

SONARR_SPEC = SectionSpec(
    name="sonarr",
    known_keys=(
        "add_missing",
        "add_existing",
        "upgrade_existing",
        "monitor_existing",
        "ignore_cache",
        "root_folder_path",
        "monitor",
        "quality_profile",
        "language_profile",
        "series_type",
        "season_folder",
        "tag",
        "search",
        "cutoff_search",
    ),
    secret_keys=("url", "token"),
    credential_keys=("token",),
    enablement="opt_in",
)

TRAKT_SPEC = SectionSpec(
    name="trakt",
    known_keys=("client_id",),
    secret_keys=("client_secret", "authorization"),
    credential_keys=("client_secret",),
    nested_secret_keys={"authorization": ("access_token", "refresh_token")},
    enablement="opt_in",
)

# Known keys are listed in the order they are written back out
LIBRARY_SPEC = SectionSpec(
    name="library",
    known_keys=(
        "library_name",
        "template_variables",
        "schedule",
        "run_order",
        "filters",
        "collection_files",
        "overlay_files",
        "metadata_files",
        "operations",
        "settings",
    ),
)

SECTION_SPECS: Dict[str, SectionSpec] = {
    spec.name: spec
    for spec in (
        SETTINGS_SPEC,
        PLEX_SPEC,
        TMDB_SPEC,
        TAUTULLI_SPEC,
        MDBLIST_SPEC,
        RADARR_SPEC,
        SONARR_SPEC,
        TRAKT_SPEC,
    )
}

# Fixed emission order of the generated document
TOP_LEVEL_KEYS: Tuple[str, ...] = tuple(SECTION_SPECS) + ("libraries",)

# Sections that own credentials in a profile
SERVICE_NAMES: Tuple[str, ...] = tuple(
    name for name, spec in SECTION_SPECS.items() if spec.secret_keys
)


def get_section_spec(name: str) -> SectionSpec:
    """Look up the spec of a top-level section.

    Raises:
        KeyError: If the section is not part of the registry
    """
    try:
        return SECTION_SPECS[name]
    except KeyError:
        raise KeyError(f"Unknown config section: {name}") from None
