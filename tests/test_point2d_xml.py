# -*- coding: utf-8 -*-
"""Point2D XML serialization Test Module"""

import math
from xml.dom.minidom import getDOMImplementation, parseString

import pytest

from spatial_euclidean import (
    FormatError,
    Point2D,
)

from .conftest import TEST_RES_DIR

RES_XML = TEST_RES_DIR / 'xml'


def test_to_xml_writes_attributes():
    assert Point2D(1.5, -2).to_xml() == '<Point2D X="1.5" Y="-2.0"/>'
    assert Point2D(0, 1).to_xml('Location') == '<Location X="0.0" Y="1.0"/>'


def test_write_xml_into_existing_element():
    # arrange
    document = getDOMImplementation().createDocument(None, 'Shape', None)
    anchor = document.createElement('Anchor')
    document.documentElement.appendChild(anchor)

    # act
    Point2D(3, 4).write_xml(anchor)

    # assert
    assert anchor.getAttribute('X') == '3.0'
    assert anchor.getAttribute('Y') == '4.0'
    assert Point2D.read_from(anchor) == Point2D(3, 4)


def test_to_element():
    document = getDOMImplementation().createDocument(None, 'Shape', None)
    element = Point2D(1, 2).to_element(document, 'Corner')
    assert element.tagName == 'Corner'
    assert Point2D.read_from(element) == Point2D(1, 2)


@pytest.mark.parametrize("point", [
    Point2D(0.1, 1e-300),
    Point2D(-123456789.987654321, 2 / 3),
    Point2D(math.inf, -math.inf),
])
def test_xml_roundtrip_exact(point):
    assert Point2D.read_from(point.to_xml()) == point


def test_xml_roundtrip_nan():
    point = Point2D.read_from(Point2D(math.nan, 1).to_xml())
    assert math.isnan(point.x)
    assert point.y == 1


def test_special_values_spelling():
    assert Point2D(math.inf, math.nan).to_xml() == '<Point2D X="INF" Y="NaN"/>'


def test_read_attribute_and_element_forms_agree():
    from_attributes = Point2D.read_from((RES_XML / 'point_attributes.xml').read_text(encoding='utf-8'))
    from_elements = Point2D.read_from((RES_XML / 'point_elements.xml').read_text(encoding='utf-8'))
    assert from_attributes == Point2D(12.5, -3.25)
    assert from_attributes == from_elements


def test_read_mixed_form():
    assert Point2D.read_from('<P X="1"><Y>2</Y></P>') == Point2D(1, 2)


def test_read_prefers_attribute():
    assert Point2D.read_from('<P X="1"><X>5</X><Y>2</Y></P>') == Point2D(1, 2)


def test_read_ignores_nested_grandchildren():
    with pytest.raises(FormatError):
        Point2D.read_from('<P X="1"><Inner><Y>2</Y></Inner></P>')


def test_read_from_document():
    document = parseString('<Point2D X="7" Y="8"/>')
    assert Point2D.read_from(document) == Point2D(7, 8)


def test_read_missing_member():
    with pytest.raises(FormatError) as _err:
        Point2D.read_from((RES_XML / 'point_missing_y.xml').read_text(encoding='utf-8'))
    assert "'Y'" in str(_err.value)


@pytest.mark.parametrize("xml_text", [
    '<P X="abc" Y="1"/>',
    '<P X="1_000" Y="1"/>',
    '<P X="" Y="1"/>',
    '<P><X>1</X><Y></Y></P>',
])
def test_read_invalid_number(xml_text):
    with pytest.raises(FormatError):
        Point2D.read_from(xml_text)


def test_read_corrupt_xml():
    with pytest.raises(FormatError):
        Point2D.read_from('<P X="1" Y="2"')


def test_no_schema_published():
    assert Point2D.get_schema() is None
