from typing import Any, Dict, List, Literal, Optional, TypedDict, Union

# Arbitrary YAML values kept verbatim in extras
JsonValue = Union[None, bool, int, float, str, List[Any], Dict[str, Any]]
Extras = Dict[str, JsonValue]

YamlMode = Literal["template", "masked", "full"]

# Config Types (Kometa config.yml, secrets stripped)
class SettingsConfig(TypedDict, total=False):
    cache: bool
    cache_expiration: Union[int, float]
    asset_directory: Union[str, List[str]]
    asset_folders: bool
    asset_depth: Union[int, float]
    create_asset_folders: bool
    prioritize_assets: bool
    dimensional_asset_rename: bool
    download_url_assets: bool
    show_missing_assets: bool
    show_missing_season_assets: bool
    show_missing_episode_assets: bool
    show_asset_not_needed: bool
    sync_mode: Literal["append", "sync"]
    default_collection_order: str
    delete_below_minimum: bool
    delete_not_scheduled: bool
    run_again_delay: Union[int, float]
    missing_only_released: bool
    show_unmanaged: bool
    show_filtered: bool
    show_options: bool
    show_missing: bool
    only_filter_missing: bool
    save_report: bool
    tvdb_language: str
    ignore_ids: Optional[List[str]]
    ignore_imdb_ids: Optional[List[str]]
    item_refresh_delay: Union[int, float]
    playlist_sync_to_users: Union[Literal["all", "none"], List[str], None]
    playlist_exclude_users: Optional[List[str]]
    playlist_report: bool
    verify_ssl: bool
    custom_repo: Optional[str]
    check_nightly: bool
    run_order: List[str]
    extras: Extras

class PlexConfig(TypedDict, total=False):
    enabled: bool
    timeout: Union[int, float]
    clean_bundles: bool
    empty_trash: bool
    optimize: bool
    extras: Extras

class TmdbConfig(TypedDict, total=False):
    enabled: bool
    cache_expiration: Union[int, float]
    language: str
    region: str
    extras: Extras

class TautulliConfig(TypedDict, total=False):
    enabled: bool
    extras: Extras

class MdbListConfig(TypedDict, total=False):
    enabled: bool
    cache_expiration: Union[int, float]
    extras: Extras

class RadarrConfig(TypedDict, total=False):
    enabled: bool
    add_missing: bool
    add_existing: bool
    upgrade_existing: bool
    monitor_existing: bool
    ignore_cache: bool
    root_folder_path: str
    monitor: bool
    availability: Literal["announced", "cinemas", "released", "db"]
    quality_profile: str
    tag: Optional[List[str]]
    search: bool
    extras: Extras

class SonarrConfig(TypedDict, total=False):
    enabled: bool
    add_missing: bool
    add_existing: bool
    upgrade_existing: bool
    monitor_existing: bool
    ignore_cache: bool
    root_folder_path: str
    monitor: Literal["all", "future", "missing", "existing", "pilot", "first", "latest", "none"]
    quality_profile: str
    language_profile: str
    series_type: Literal["standard", "daily", "anime"]
    season_folder: bool
    tag: Optional[List[str]]
    search: bool
    cutoff_search: bool
    extras: Extras

class TraktConfig(TypedDict, total=False):
    enabled: bool
    client_id: str
    extras: Extras

# One entry of collection_files / overlay_files / metadata_files.
# Usually {default: ..., template_variables: {...}}; also file/git/url/repo.
FileEntry = Dict[str, Any]

class LibraryConfig(TypedDict, total=False):
    library_name: str
    template_variables: Dict[str, Any]
    schedule: str
    run_order: List[str]
    filters: Dict[str, Any]
    collection_files: List[FileEntry]
    overlay_files: List[FileEntry]
    metadata_files: List[FileEntry]
    operations: Dict[str, Any]
    settings: Dict[str, Any]
    extras: Extras

class KometaConfig(TypedDict, total=False):
    settings: SettingsConfig
    plex: PlexConfig
    tmdb: TmdbConfig
    tautulli: TautulliConfig
    mdblist: MdbListConfig
    radarr: RadarrConfig
    sonarr: SonarrConfig
    trakt: TraktConfig
    libraries: Dict[str, LibraryConfig]
    extras: Extras

# Profile Types (credentials, kept outside the config)
class UrlTokenSecrets(TypedDict, total=False):
    url: str
    token: str

class UrlApiKeySecrets(TypedDict, total=False):
    url: str
    apikey: str

class ApiKeySecrets(TypedDict, total=False):
    apikey: str

class TraktAuthorizationSecrets(TypedDict, total=False):
    access_token: str
    refresh_token: str

class TraktSecrets(TypedDict, total=False):
    client_secret: str
    authorization: TraktAuthorizationSecrets

class ProfileSecrets(TypedDict, total=False):
    plex: UrlTokenSecrets
    tmdb: ApiKeySecrets
    tautulli: UrlApiKeySecrets
    mdblist: ApiKeySecrets
    radarr: UrlTokenSecrets
    sonarr: UrlTokenSecrets
    trakt: TraktSecrets

class Profile(TypedDict, total=False):
    name: str
    description: Optional[str]
    secrets: ProfileSecrets

# Validation Types
class ValidationIssue(TypedDict):
    type: Literal["error", "warning"]
    path: List[str]
    message: str

class ValidationResult(TypedDict):
    valid: bool
    errors: List[ValidationIssue]
    warnings: List[ValidationIssue]
