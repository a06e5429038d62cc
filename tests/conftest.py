"""Shared builders for WSDL/XSD documents on disk."""

from __future__ import annotations

from pathlib import Path

import pytest
import requests

WSDL_NS = "http://schemas.xmlsoap.org/wsdl/"
XSD_NS = "http://www.w3.org/2001/XMLSchema"
NSMAP = {"wsdl": WSDL_NS, "xsd": XSD_NS}


def schema_text(target_namespace: str | None = None, body: str = "") -> str:
    tns = f' targetNamespace="{target_namespace}"' if target_namespace else ""
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        f'<xsd:schema xmlns:xsd="{XSD_NS}"{tns} elementFormDefault="qualified">\n'
        f"{body}\n"
        "</xsd:schema>\n"
    )


def wsdl_text(types: str | None = None, before_types: str = "", after_types: str = "") -> str:
    types_block = f"<wsdl:types>{types}</wsdl:types>" if types is not None else ""
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        f'<wsdl:definitions xmlns:wsdl="{WSDL_NS}" xmlns:xsd="{XSD_NS}" '
        'targetNamespace="urn:service">\n'
        f"{before_types}{types_block}{after_types}\n"
        "</wsdl:definitions>\n"
    )


def inline_schema(body: str, target_namespace: str = "urn:service") -> str:
    return f'<xsd:schema targetNamespace="{target_namespace}">{body}</xsd:schema>'


def import_tag(namespace: str | None, location: str | None) -> str:
    attrs = ""
    if namespace is not None:
        attrs += f' namespace="{namespace}"'
    if location is not None:
        attrs += f' schemaLocation="{location}"'
    return f"<xsd:import{attrs}/>"


def include_tag(location: str) -> str:
    return f'<xsd:include schemaLocation="{location}"/>'


def element_tag(name: str) -> str:
    return f'<xsd:element name="{name}" type="xsd:string"/>'


@pytest.fixture
def write(tmp_path: Path):
    """Write `text` to `tmp_path / name` and return the path as a string."""

    def _write(name: str, text: str) -> str:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return str(path)

    return _write


class FakeResponse:
    def __init__(self, url: str, content: bytes, status_code: int = 200) -> None:
        self.url = url
        self.content = content
        self.status_code = status_code

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error for url: {self.url}")


class FakeSession:
    """Serves `documents` by URL and records every request."""

    def __init__(self, documents: dict[str, bytes] | None = None) -> None:
        self.documents = documents or {}
        self.requested: list[str] = []
        self.closed = False

    def get(self, url: str, **kwargs) -> FakeResponse:
        self.requested.append(url)
        if url not in self.documents:
            return FakeResponse(url, b"", 404)
        return FakeResponse(url, self.documents[url])

    def close(self) -> None:
        self.closed = True

    def __enter__(self) -> FakeSession:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
