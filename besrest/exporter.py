"""
Export of site content from a BES server to local ``.bes`` files.

Layout on disk::

    <export_folder>/<site path>/<content tag>/<ID> - <name>.bes

All path parts go through sanitize_txt().  The item ID in the file name
keeps items that share a display name from overwriting each other.
"""

import enum
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

import requests
from lxml import etree
from tqdm import tqdm

from besrest.config import (
    DEFAULT_NAME_TRIM,
    EXPORT_EXTENSION,
    EXTERNAL_SITE_MARKER,
    SITE_RESOURCE_PREFIX,
)
from besrest.connection import BESConnection
from besrest.logging_setup import log
from besrest.utils.files import sanitize_txt, save_text
from besrest.utils.timestamps import parse_bes_modtime


class ExportStatus(enum.Enum):
    EXPORTED = "exported"
    NO_CONTENT = "no_content"      # listing was not HTTP 200 or not XML


@dataclass
class ExportedItem:
    path: Path
    tag: str
    item_id: str
    name: str
    last_modified: datetime | None = None


@dataclass
class SiteExport:
    site_path: str
    status: ExportStatus
    items: list[ExportedItem] = field(default_factory=list)


def _item_field(item: etree._Element, name: str) -> str:
    """Read *name* from an attribute, else from a same-named child element."""
    value = item.get(name)
    if value is None:
        value = item.findtext(name)
    return value or ""


class SiteExporter:
    """Walks sites and their content on one connection, strictly in sequence."""

    def __init__(self, conn: BESConnection) -> None:
        self.conn = conn

    def export_site_contents(
        self,
        site_path: str,
        export_folder: str | Path = "./",
        name_trim: int = DEFAULT_NAME_TRIM,
        verbose: bool = False,
    ) -> SiteExport:
        """Write every content item of *site_path* under *export_folder*.

        Items whose own fetch does not answer HTTP 200 are skipped rather
        than having the error body written out.
        """
        try:
            content = self.conn.get(f"site/{site_path}/content")
        except requests.RequestException as exc:
            log.warning("[SKIP] Content listing for site %s failed: %s", site_path, exc)
            return SiteExport(site_path, ExportStatus.NO_CONTENT)
        if content.status_code != 200 or content.xml is None:
            log.debug("[SKIP] No content listing for site %s (HTTP %s)",
                      site_path, content.status_code)
            return SiteExport(site_path, ExportStatus.NO_CONTENT)

        root = content.xml
        content_root = root.find("SiteContent")
        if content_root is None:
            content_root = root

        export = SiteExport(site_path, ExportStatus.EXPORTED)
        for item in content_root.iterchildren(tag=etree.Element):
            exported = self._export_item(site_path, item, Path(export_folder), name_trim, verbose)
            if exported is not None:
                export.items.append(exported)

        log.info("[SITE] %s: %d item(s) exported", site_path, len(export.items))
        return export

    def _export_item(
        self,
        site_path: str,
        item: etree._Element,
        export_folder: Path,
        name_trim: int,
        verbose: bool,
    ) -> ExportedItem | None:
        tag = etree.QName(item).localname
        resource = _item_field(item, "Resource")
        if not resource:
            log.warning("[SKIP] %s item in %s has no Resource", tag, site_path)
            return None

        try:
            item_export = self.conn.get(resource.replace("http://", "https://"))
        except requests.RequestException as exc:
            log.warning("[SKIP] %s failed: %s", resource, exc)
            return None
        if item_export.status_code != 200:
            log.warning("[SKIP] %s returned HTTP %s", resource, item_export.status_code)
            return None

        item_id = _item_field(item, "ID")
        name = _item_field(item, "Name")[:name_trim]
        last_modified = parse_bes_modtime(_item_field(item, "LastModified"))

        site_dir, tag_dir, safe_id, safe_name = sanitize_txt(site_path, tag, item_id, name)
        local_path = export_folder / site_dir / tag_dir / f"{safe_id} - {safe_name}{EXPORT_EXTENSION}"
        save_text(local_path, item_export.text)

        if verbose:
            log.info("[SAVE] %s (modified %s)", local_path, last_modified or "unknown")
        return ExportedItem(local_path, tag, item_id, name, last_modified)

    def export_all_sites(
        self,
        include_external: bool = False,
        export_folder: str | Path = "./",
        name_trim: int = DEFAULT_NAME_TRIM,
        verbose: bool = False,
    ) -> list[SiteExport]:
        """Export every site the server lists, skipping external ones by default."""
        try:
            results = self.conn.get("sites")
        except requests.RequestException as exc:
            log.warning("[SKIP] Site listing failed: %s", exc)
            return []
        if results.status_code != 200 or results.xml is None:
            log.debug("[SKIP] No site listing (HTTP %s)", results.status_code)
            return []

        site_paths = []
        for elem in results.xml.iter(tag=etree.Element):
            resource = elem.get("Resource")
            if not resource or not etree.QName(elem).localname.endswith("Site"):
                continue
            site_path = resource.split(SITE_RESOURCE_PREFIX, 1)[-1]
            if EXTERNAL_SITE_MARKER in site_path and not include_external:
                log.debug("[SKIP] External site %s", site_path)
                continue
            site_paths.append(site_path)

        exports = []
        for site_path in tqdm(site_paths, desc="Exporting", unit="site",
                              dynamic_ncols=True, disable=not verbose):
            log.info("[SITE] Exporting %s", site_path)
            exports.append(
                self.export_site_contents(site_path, export_folder, name_trim, verbose)
            )
        return exports
