"""SOAP 1.1 envelope encoding and decoding."""

from __future__ import annotations

import datetime as _dt
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Iterator, Mapping

from account_client.exceptions import DomainError, ProtocolError

SOAP_ENV = "http://schemas.xmlsoap.org/soap/envelope/"
XSI = "http://www.w3.org/2001/XMLSchema-instance"
XSD = "http://www.w3.org/2001/XMLSchema"

METHOD_PREFIX = "n0"

ET.register_namespace("soapenv", SOAP_ENV)
ET.register_namespace("xsi", XSI)


class SoapFault(DomainError):
    """Fault element returned in place of a response payload."""

    def __init__(self, faultcode: str, faultstring: str) -> None:
        super().__init__(f"{faultcode}: {faultstring}" if faultcode else faultstring)
        self.faultcode = faultcode
        self.faultstring = faultstring


@dataclass
class SoapObject:
    """Structured element of a decoded reply.

    Properties keep document order. Leaf values are the raw element text
    (``None`` for ``xsi:nil`` elements); elements with children become nested
    ``SoapObject`` instances.
    """

    name: str
    namespace: str | None = None
    properties: list[tuple[str, Any]] = field(default_factory=list)

    @property
    def property_count(self) -> int:
        return len(self.properties)

    def get_property(self, index: int) -> Any:
        return self.properties[index][1]

    def has_property(self, name: str) -> bool:
        return any(key == name for key, _ in self.properties)

    def get_property_as_string(self, name: str) -> str | None:
        """Return the text of the first property called ``name``.

        Missing and nil properties both yield ``None``.
        """
        for key, value in self.properties:
            if key != name:
                continue
            if value is None or isinstance(value, str):
                return value
            raise ProtocolError(f"Field {name!r} is a structure, expected a scalar", field=name)
        return None

    @property
    def response(self) -> Any:
        """First property value, the return value of an RPC-style reply."""
        if not self.properties:
            raise ProtocolError(f"Reply {self.name!r} carries no return value")
        return self.properties[0][1]

    def __iter__(self) -> Iterator[Any]:
        return (value for _, value in self.properties)


# --------- scalar formatting ---------


def _xsd_type(value: Any) -> str:
    if isinstance(value, bool):
        return "xsd:boolean"
    if isinstance(value, int):
        return "xsd:long"
    if isinstance(value, (float, Decimal)):
        return "xsd:double"
    if isinstance(value, _dt.date) and not isinstance(value, _dt.datetime):
        return "xsd:date"
    if isinstance(value, _dt.datetime):
        return "xsd:dateTime"
    return "xsd:string"


def _format_scalar(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return repr(value)
    if isinstance(value, (_dt.date, _dt.datetime)):
        return value.isoformat()
    return str(value)


def _localname(tag: str) -> str:
    # "{uri}Name" -> "Name"
    return tag.split("}", 1)[1] if tag.startswith("{") else tag


def _namespace(tag: str) -> str | None:
    return tag[1:].split("}", 1)[0] if tag.startswith("{") else None


def _is_xsi_nil(el: ET.Element) -> bool:
    nil_attr = el.attrib.get(f"{{{XSI}}}nil")
    return (nil_attr or "").lower() in ("true", "1")


# --------- encode ---------


def _append_value(parent: ET.Element, name: str, value: Any) -> None:
    el = ET.SubElement(parent, name)

    if value is None:
        el.set(f"{{{XSI}}}nil", "true")
        return

    if isinstance(value, Mapping):
        for k, v in value.items():
            _append_value(el, str(k), v)
        return

    el.set(f"{{{XSI}}}type", _xsd_type(value))
    el.text = _format_scalar(value)


def soap_encode(method: str, params: Mapping[str, Any] | None = None, *, namespace: str) -> str:
    """Build an RPC-style SOAP 1.1 request envelope.

    The method element is qualified by ``namespace``; its arguments are
    unqualified and carry an ``xsi:type`` annotation::

        <soapenv:Envelope>
          <soapenv:Body>
            <n0:createCompte xmlns:n0="...">
              <solde xsi:type="xsd:double">100.0</solde>
            </n0:createCompte>
          </soapenv:Body>
        </soapenv:Envelope>
    """
    env = ET.Element(f"{{{SOAP_ENV}}}Envelope")
    env.set("xmlns:xsd", XSD)
    body = ET.SubElement(env, f"{{{SOAP_ENV}}}Body")

    method_el = ET.SubElement(body, f"{METHOD_PREFIX}:{method}")
    method_el.set(f"xmlns:{METHOD_PREFIX}", namespace)

    for k, v in (params or {}).items():
        _append_value(method_el, str(k), v)

    return ET.tostring(env, encoding="unicode", xml_declaration=False)


# --------- decode ---------


def _xml_to_obj(el: ET.Element) -> Any:
    if _is_xsi_nil(el):
        return None

    children = list(el)
    if not children:
        return (el.text or "").strip()

    obj = SoapObject(name=_localname(el.tag), namespace=_namespace(el.tag))
    for child in children:
        obj.properties.append((_localname(child.tag), _xml_to_obj(child)))
    return obj


def _raise_fault(el: ET.Element) -> None:
    faultcode = ""
    faultstring = ""
    for child in el:
        name = _localname(child.tag)
        if name == "faultcode":
            faultcode = (child.text or "").strip()
        elif name == "faultstring":
            faultstring = (child.text or "").strip()
    raise SoapFault(faultcode, faultstring or "SOAP fault")


def soap_body_payload(xml: str | bytes) -> ET.Element:
    """Return the first element inside the SOAP Body."""
    try:
        root = ET.fromstring(xml)
    except ET.ParseError as e:
        raise ProtocolError(f"Reply is not well-formed XML: {e}") from e

    if root.tag != f"{{{SOAP_ENV}}}Envelope":
        raise ProtocolError(f"Expected a SOAP Envelope, got {_localname(root.tag)!r}")
    body = root.find(f"{{{SOAP_ENV}}}Body")
    if body is None:
        raise ProtocolError("SOAP Body not found")
    for child in body:
        return child
    raise ProtocolError("SOAP Body is empty")


def soap_decode(xml: str | bytes) -> SoapObject:
    """Decode a reply envelope into its payload object.

    Raises
    ------
    SoapFault
        If the body carries a Fault element.
    ProtocolError
        If the envelope is malformed.
    """
    payload = soap_body_payload(xml)

    if payload.tag == f"{{{SOAP_ENV}}}Fault":
        _raise_fault(payload)

    decoded = _xml_to_obj(payload)
    if isinstance(decoded, SoapObject):
        return decoded
    # Payload without children, e.g. an empty createCompteResponse
    return SoapObject(name=_localname(payload.tag), namespace=_namespace(payload.tag))
