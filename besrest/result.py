"""
Wrapper around a single BES REST API response.

The XML, dict and JSON views are built on first access and cached on
the instance, so repeated access never re-parses the body.
"""

import json
from functools import cached_property

import requests
from lxml import etree, objectify

from besrest.logging_setup import log
from besrest.xmlmap import ConvertedValue, elem_to_dict


def _parse_xml(body: bytes | str) -> etree._Element:
    # Parse bytes so lxml honours the declared encoding; str input that
    # carries an encoding declaration is refused by lxml
    if isinstance(body, str):
        body = body.encode("utf-8")
    return etree.fromstring(body)


class RESTResult:
    """One HTTP response from the BES REST API plus its decoded views."""

    def __init__(self, request: requests.Response) -> None:
        self.request = request

        body = request.content
        if isinstance(body, bytes):
            self.text = body.decode("utf-8", errors="replace")
        else:
            self.text = request.text
        self._body = body if isinstance(body, bytes) else self.text

        self.valid = self._probe_valid()

    def __str__(self) -> str:
        if self.xml is not None:
            return etree.tostring(self.xml, encoding="unicode")
        return self.text

    def __repr__(self) -> str:
        return f"<RESTResult status={self.status_code} valid={self.valid}>"

    @property
    def status_code(self) -> int:
        return self.request.status_code

    def _probe_valid(self) -> bool:
        content_type = self.request.headers.get("Content-Type", "").lower()
        if "xml" in content_type:
            return True
        try:
            _parse_xml(self._body)
        except (etree.XMLSyntaxError, ValueError):
            return False
        return True

    @cached_property
    def xml(self) -> etree._Element | None:
        """Root element of the response, or None if it is not XML."""
        if not self.valid or not self.text.strip():
            return None
        try:
            return _parse_xml(self._body)
        except (etree.XMLSyntaxError, ValueError) as exc:
            log.warning("Response claimed XML but did not parse: %s", exc)
            return None

    @cached_property
    def besobj(self) -> objectify.ObjectifiedElement | None:
        """lxml.objectify view of the response for attribute-style access."""
        if self.xml is None:
            return None
        return objectify.fromstring(etree.tostring(self.xml))

    @cached_property
    def besdict(self) -> dict[str, ConvertedValue]:
        """Children of the root element as nested dicts/lists/strings.

        Falls back to ``{"text": str(self)}`` when there is no XML to
        convert.
        """
        root = self.xml
        if root is None:
            return {"text": str(self)}
        try:
            return elem_to_dict(root)
        except Exception as exc:
            log.warning("Could not convert response XML to dict: %s", exc)
            return {"text": str(self)}

    @cached_property
    def besjson(self) -> str:
        return json.dumps(self.besdict, indent=2)
