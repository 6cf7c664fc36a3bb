"""xml_util module"""

import logging
import math
from pathlib import PurePath
from typing import Any, Optional, Union
from xml.dom.minidom import Document, Element, Node, parse, parseString
from xml.parsers.expat import ExpatError

from .common import FormatError

_LOGGER = logging.getLogger(__name__)

XmlSource = Union[Element, Document, str, bytes, PurePath]


class MinidomUtil:
    """Helper Methods for XML Reading and Writing"""

    @staticmethod
    def to_element(source: XmlSource) -> Element:
        """Position at element content of given source

        Paths are parsed as files, so the XML declaration
        decides about the encoding.
        """
        if isinstance(source, PurePath):
            try:
                source = parse(str(source))
            except ExpatError as _exc:
                raise FormatError(f"corrupt XML '{source}': {_exc}") from _exc
        elif isinstance(source, (str, bytes)):
            try:
                source = parseString(source)
            except ExpatError as _exc:
                raise FormatError(f"corrupt XML: {_exc}") from _exc
        if isinstance(source, Document):
            source = source.documentElement
        if source is None or source.nodeType != Node.ELEMENT_NODE:
            raise FormatError('invalid document root')
        return source

    @staticmethod
    def read_attribute_or_element(element: Element, name: str) -> Optional[str]:
        """Prefer attribute, fall back to direct child element"""
        if element.hasAttribute(name):
            return element.getAttribute(name)
        for child in element.childNodes:
            if child.nodeType == Node.ELEMENT_NODE and child.tagName == name:
                _LOGGER.debug("%s: read '%s' from child element", element.tagName, name)
                return MinidomUtil.text_content(child)
        return None

    @staticmethod
    def text_content(element: Element) -> str:
        texts = [n.data for n in element.childNodes
                 if n.nodeType in (Node.TEXT_NODE, Node.CDATA_SECTION_NODE)]
        return ''.join(texts)

    @staticmethod
    def set_attribute(element: Element, attr_name: str, value: Any) -> bool:
        """Set attribute, report if anything changed"""
        new_value: str = str(value)
        old_value: Optional[str] = element.getAttribute(attr_name) if element.hasAttribute(attr_name) else None
        if new_value != old_value:
            element.setAttribute(attr_name, new_value)
            return True
        return False

    @staticmethod
    def to_xml_double(value: float) -> str:
        """Invariant literal, special values as XML Schema spells them"""
        if math.isnan(value):
            return 'NaN'
        if math.isinf(value):
            return 'INF' if value > 0 else '-INF'
        return repr(float(value))

    @staticmethod
    def from_xml_double(text: Optional[str], name: str = '') -> float:
        if text is None:
            raise FormatError(f"missing value for '{name}'")
        _text = text.strip()
        # reject python specific spellings like '1_000'
        if '_' in _text:
            raise FormatError(f"invalid number '{text}' for '{name}'")
        try:
            return float(_text)
        except ValueError as _val_err:
            raise FormatError(f"invalid number '{text}' for '{name}'") from _val_err
