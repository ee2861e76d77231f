from core.discovery.save_roots import (
    RootResolution,
    destination_user_folders,
    list_steam_user_folders,
    list_wgs_user_folders,
    resolve_save_dir,
    source_user_folders,
)

__all__ = [
    "RootResolution",
    "destination_user_folders",
    "list_steam_user_folders",
    "list_wgs_user_folders",
    "resolve_save_dir",
    "source_user_folders",
]
