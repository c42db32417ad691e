"""Tests for metro-area lookup and location cleanup."""

from __future__ import annotations

import pytest

from spectrumdirect.harmonize.metro_areas import (
    clean_location,
    find_metro,
    get_province,
    guess_metro_area,
    metro_names,
    select_metro,
)


class TestLookupTables:
    def test_metro_names(self):
        assert set(metro_names()) >= {"ottawa", "gta"}

    def test_province(self):
        assert get_province("ottawa") == "ON"
        assert get_province("nowhere") == ""

    def test_find_metro_case_insensitive(self):
        assert find_metro("kanata") == "ottawa"
        assert find_metro("North York") == "gta"
        assert find_metro("TOROTNO") == "gta"
        assert find_metro("Montreal") is None


class TestGuessMetroArea:
    def test_link_location(self):
        assert guess_metro_area({"Link_Station_Location": "KANATA", "Station_Location": "OTTAWA (1 MAIN ST)"}) == "KANATA"

    def test_province_suffix_stripped(self):
        assert guess_metro_area({"Link_Station_Location": "Ottawa, ON", "Station_Location": "x"}) == "Ottawa"
        assert guess_metro_area({"Link_Station_Location": "Gatineau qc", "Station_Location": "x"}) == "Gatineau"

    def test_gatineau_special_case(self):
        record = {"Link_Station_Location": "VE3XYZ 1", "Station_Location": "GATINEAU (12 RUE Y)"}
        assert guess_metro_area(record) == "Gatineau"

    def test_coded_link_uses_station_place(self):
        record = {"Link_Station_Location": "AB12345", "Station_Location": "KANATA (300 MARCH RD)"}
        assert guess_metro_area(record) == "KANATA"

    def test_coded_link_without_place(self):
        record = {"Link_Station_Location": "AB12345", "Station_Location": "NO ADDRESS"}
        assert guess_metro_area(record) == ""

    def test_no_link(self):
        assert guess_metro_area({"Link_Station_Location": "", "Station_Location": "OTTAWA (1 MAIN ST)"}) == ""
        assert guess_metro_area({}) == ""


class TestSelectMetro:
    def test_selects_ottawa(self):
        records = [
            {"Link_Station_Location": "Kanata", "Station_Location": "A (1)"},
            {"Link_Station_Location": "Toronto", "Station_Location": "B (2)"},
            {"Link_Station_Location": "Montreal, QC", "Station_Location": "C (3)"},
            {"Link_Station_Location": "", "Station_Location": ""},
        ]
        selected = select_metro(records, "ottawa")
        assert selected == [records[0]]

    def test_selects_gta(self):
        records = [
            {"Link_Station_Location": "Kanata", "Station_Location": "A (1)"},
            {"Link_Station_Location": "RICMOND HILL", "Station_Location": "B (2)"},
        ]
        assert select_metro(records, "gta") == [records[1]]

    def test_unknown_place_logged(self, caplog):
        records = [{"Link_Station_Location": "Montreal", "Station_Location": "C (3)"}]
        with caplog.at_level("WARNING"):
            assert select_metro(records, "ottawa") == []
        assert "Montreal" in caplog.text

    def test_unknown_metro(self):
        with pytest.raises(ValueError):
            select_metro([], "vancouver")


class TestCleanLocation:
    def test_place_and_address_swapped(self):
        assert clean_location("OTTAWA (1 MAIN ST)") == "1 MAIN ST, Ottawa, ON"

    def test_nepean_spelling(self):
        assert clean_location("NEAPEAN (99 RIVER RD)") == "99 RIVER RD, Nepean, ON"

    def test_trailing_text_kept(self):
        assert clean_location("KANATA (300 MARCH RD) ROOFTOP") == "300 MARCH RD, KANATA, ROOFTOP"

    def test_province(self):
        assert clean_location("GATINEAU (12 RUE Y)", province="QC") == "12 RUE Y, GATINEAU, QC"

    def test_plain_location_untouched(self):
        assert clean_location("Kanata") == "Kanata"
