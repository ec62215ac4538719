"""
besrest
=======
Python client for a BES (BigFix-style) fleet-management REST API:
authenticated requests, XML response decoding, session relevance
queries, file uploads, and export of site content to local files.

Package structure
-----------------
besrest/
├── __init__.py       – package init and public API
├── config.py         – configuration constants and BES_* env defaults
├── logging_setup.py  – package logger and setup_logging()
├── connection.py     – BESConnection: login, verbs, relevance, upload
├── result.py         – RESTResult: cached text / XML / dict / JSON views
├── xmlmap.py         – elem_to_dict XML → dict conversion
├── exporter.py       – SiteExporter: sites → content items → .bes files
├── network/          – requests.Session factory, root-server normalisation
└── utils/            – file-name sanitising, saving, hashing, timestamps

Quick start
-----------
    from besrest import BESConnection, SiteExporter

    conn = BESConnection("admin", "secret", "bes.example.com")
    print(conn.session_relevance_string("number of bes computers"))
    SiteExporter(conn).export_all_sites(export_folder="export")
"""

from .connection import BESConnection
from .exporter import ExportStatus, ExportedItem, SiteExport, SiteExporter
from .logging_setup import setup_logging
from .network import normalize_root_server
from .result import RESTResult
from .utils import parse_bes_modtime, sanitize_txt
from .xmlmap import elem_to_dict

__all__ = [
    "BESConnection",
    "RESTResult",
    "SiteExporter",
    "SiteExport",
    "ExportedItem",
    "ExportStatus",
    "elem_to_dict",
    "sanitize_txt",
    "parse_bes_modtime",
    "normalize_root_server",
    "setup_logging",
]
