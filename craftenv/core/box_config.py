"""
Homestead.yaml management for craftenv.

This module registers the project with the Homestead box: its shared
folders, its nginx site and its database. Entries that already exist are
left untouched, so merging the same project twice changes nothing.
"""

from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

import yaml

from ..config.settings import GUEST_SSL_DIR, SHARED_FOLDER_TYPE, ProjectConfig
from ..exceptions import BoxConfigError
from ..utils.logging import log_info

BOX_COLLECTIONS = ("folders", "sites", "databases")


def ensure_unique_entry(collection: List[Any], entry: Any, key: Callable[[Any], Any]) -> bool:
    """Append ``entry`` unless an item with the same key is already present.

    Args:
        collection: Ordered list to update in place
        entry: Item to add
        key: Function extracting the uniqueness key from an item

    Returns:
        True if the entry was appended, False if it was already there
    """
    wanted = key(entry)
    for item in collection:
        try:
            if key(item) == wanted:
                return False
        except (KeyError, TypeError, AttributeError):
            # Entries of an unexpected shape never match
            continue
    collection.append(entry)
    return True


def _map_key(item: Dict[str, Any]) -> Any:
    return item["map"]


def _identity(item: Any) -> Any:
    return item


def build_box_entries(config: ProjectConfig) -> Dict[str, List[Any]]:
    """Entries the project needs in each Homestead collection."""
    return {
        "folders": [
            {
                "map": str(config.project_root),
                "to": config.guest_project_path,
                "type": SHARED_FOLDER_TYPE,
            },
            {
                "map": str(config.ssl_path),
                "to": GUEST_SSL_DIR,
                "type": SHARED_FOLDER_TYPE,
            },
        ],
        "sites": [
            {
                "map": config.local_domain,
                "to": f"{config.guest_project_path}/www",
            },
        ],
        "databases": [config.project],
    }


def merge_box_config(box: Dict[str, Any], config: ProjectConfig) -> Dict[str, Any]:
    """Add the project's folders, site and database to a parsed Homestead.yaml.

    The mapping is updated in place and returned. Missing collections are
    initialized to empty lists; existing entries are never changed or moved.

    Raises:
        BoxConfigError: If a collection is present but is not a list
    """
    keys = {"folders": _map_key, "sites": _map_key, "databases": _identity}

    for collection, entries in build_box_entries(config).items():
        if box.get(collection) is None:
            box[collection] = []
        elif not isinstance(box[collection], list):
            raise BoxConfigError(
                f"Expected '{collection}' to be a list, got {type(box[collection]).__name__}",
                error_code="box_config_invalid",
                details={"collection": collection},
            )
        for entry in entries:
            if ensure_unique_entry(box[collection], entry, keys[collection]):
                log_info(f"Added {collection} entry: {entry}")
            else:
                log_info(f"{collection} entry already present: {entry}")
    return box


class BoxConfigManager:
    """Reads, merges and writes the Homestead box configuration."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def load(self) -> Dict[str, Any]:
        """Load Homestead.yaml.

        Raises:
            BoxConfigError: If the file cannot be read or is not a YAML mapping
        """
        try:
            with open(self.path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except OSError as e:
            raise BoxConfigError(
                f"Could not read {self.path}: {e}",
                error_code="box_config_unreadable",
                details={"path": str(self.path)},
            )
        except yaml.YAMLError as e:
            raise BoxConfigError(
                f"Invalid YAML in {self.path}: {e}",
                error_code="box_config_invalid",
                details={"path": str(self.path)},
            )

        if not isinstance(data, dict):
            raise BoxConfigError(
                f"Expected a mapping at the top of {self.path}",
                error_code="box_config_invalid",
                details={"path": str(self.path)},
            )
        return data

    def save(self, box: Dict[str, Any]) -> None:
        """Rewrite Homestead.yaml in full."""
        try:
            with open(self.path, "w", encoding="utf-8") as f:
                yaml.safe_dump(box, f, default_flow_style=False, sort_keys=False)
        except OSError as e:
            raise BoxConfigError(
                f"Could not write {self.path}: {e}",
                error_code="box_config_unwritable",
                details={"path": str(self.path)},
            )

    def get_ip(self, box: Dict[str, Any]) -> Optional[str]:
        ip = box.get("ip")
        return str(ip) if ip else None

    def merge(self, config: ProjectConfig) -> Dict[str, Any]:
        """Load, merge the project in, and save. Returns the merged document."""
        box = self.load()
        if not self.get_ip(box):
            raise BoxConfigError(
                f"No 'ip' set in {self.path}",
                error_code="box_config_missing_ip",
                details={"path": str(self.path)},
            )
        merge_box_config(box, config)
        self.save(box)
        return box
