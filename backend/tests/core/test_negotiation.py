"""Tests for negotiate: substring match on text/xml, JSON otherwise."""

from status_demo.core.negotiation import MediaType, negotiate


def test_text_xml_selects_xml():
    assert negotiate("text/xml") is MediaType.XML


def test_text_xml_inside_a_list_selects_xml():
    assert negotiate("application/json;q=0.5, text/xml") is MediaType.XML


def test_application_json_selects_json():
    assert negotiate("application/json") is MediaType.JSON


def test_wildcard_selects_json():
    assert negotiate("*/*") is MediaType.JSON


def test_application_xml_is_not_text_xml():
    assert negotiate("application/xml") is MediaType.JSON


def test_missing_header_defaults_to_json():
    assert negotiate(None) is MediaType.JSON
    assert negotiate("") is MediaType.JSON


def test_media_type_values_are_content_types():
    assert MediaType.JSON.value == "application/json"
    assert MediaType.XML.value == "text/xml"
