import pytest

from aviation_codes.dataset.builder import (
    airline_from_fields,
    airport_from_fields,
    build_airlines,
    build_airports,
    split_lines,
)
from aviation_codes.obs.metrics import get_counter
from aviation_codes.parse.records import parse_line
from aviation_codes.types import Airline, Airport


class TestAirportRecords:
    def test_positional_extraction(self):
        fields = parse_line(
            '3484,"Los Angeles International Airport","Los Angeles","United States","LAX","KLAX",'
            '33.94250107,-118.4079971,125,-8,"A","America/Los_Angeles","airport","OurAirports"'
        )
        a = airport_from_fields(fields)
        assert a == Airport(
            iata="LAX",
            icao="KLAX",
            name="Los Angeles International Airport",
            city="Los Angeles",
            country="US",
            latitude=33.94250107,
            longitude=-118.4079971,
            elevation=125.0,
            timezone="America/Los_Angeles",
        )

    def test_too_few_fields(self):
        assert airport_from_fields(["1", "x", "y"]) is None

    def test_no_codes_is_discarded(self):
        fields = parse_line('9,"Strip","Town","France",\\N,\\N,1,2,3,0,"E",\\N,"airport","x"')
        assert airport_from_fields(fields) is None

    def test_malformed_numbers_default_to_zero(self):
        fields = parse_line('9,"Strip","Town","Atlantis","TST","XTST",abc,\\N,high,0,"U",\\N,"airport","x"')
        a = airport_from_fields(fields)
        assert (a.latitude, a.longitude, a.elevation) == (0.0, 0.0, 0.0)
        assert a.country == ""
        assert a.timezone == ""


class TestAirlineRecords:
    def test_positional_extraction(self):
        fields = parse_line('1355,"British Airways",\\N,"BA","BAW","SPEEDBIRD","United Kingdom","Y"')
        assert airline_from_fields(fields) == Airline(
            iata="BA", icao="BAW", name="British Airways", callsign="SPEEDBIRD", country="GB", active=True,
        )

    @pytest.mark.parametrize("raw,expected", [("Y", True), ("N", False), ("y", False), ("", False), ("Yes", False)])
    def test_active_flag_is_literal_y(self, raw, expected):
        fields = ["1", "X Air", "", "XA", "XAA", "", "", raw]
        assert airline_from_fields(fields).active is expected

    def test_too_few_fields(self):
        assert airline_from_fields(["1", "Short Air", "SA"]) is None

    def test_no_codes_is_discarded(self):
        assert airline_from_fields(["1", "Ghost", "", "", "", "", "", "Y"]) is None


def test_split_lines_trims_document():
    assert split_lines("\na\nb\n\n") == ["a", "b"]


def test_airport_indexes(airports_dataset):
    assert airports_dataset.iata_codes == {
        "GKA", "LAX", "JFK", "WHP", "LHR", "CDG", "NRT", "RGN", "ICN", "TST", "SFO",
    }
    assert airports_dataset.icao_codes == {
        "AYGA", "KLAX", "KJFK", "KWHP", "EGLL", "LFPG", "RJAA", "VYYY", "RKSI",
        "KGPC", "XTST", "EDXH", "KSFO",
    }
    assert set(airports_dataset.by_iata) == airports_dataset.iata_codes
    assert set(airports_dataset.by_icao) == airports_dataset.icao_codes


def test_airport_index_order_follows_input(airports_dataset):
    assert list(airports_dataset.by_iata)[:4] == ["GKA", "LAX", "JFK", "WHP"]
    assert list(airports_dataset.by_iata)[-1] == "SFO"


def test_wrong_length_code_only_drops_that_scheme(airports_dataset):
    heliport = airports_dataset.by_icao["EDXH"]
    assert heliport.iata == "H1"
    assert "H1" not in airports_dataset.iata_codes


def test_icao_only_airport(airports_dataset):
    putnam = airports_dataset.by_icao["KGPC"]
    assert putnam.iata == ""
    assert putnam not in airports_dataset.by_iata.values()


def test_same_record_behind_both_keys(airports_dataset):
    assert airports_dataset.by_iata["LAX"] is airports_dataset.by_icao["KLAX"]


def test_airline_indexes(airlines_dataset):
    assert airlines_dataset.iata_codes == {"1T", "AA", "DL", "BA", "CC", "UA", "LH", "ZZ", "VN", "Q1"}
    assert airlines_dataset.icao_codes == {
        "N/A", "GNL", "RNX", "AAL", "DAL", "BAW", "ABD", "UAL", "DLH", "ZZO", "ZZN", "HVN", "QQA",
    }


def test_duplicate_code_last_record_wins_first_position(airlines_dataset):
    assert airlines_dataset.by_iata["ZZ"].name == "New Express"
    assert list(airlines_dataset.by_iata).index("ZZ") == 7
    # the earlier record is still reachable through its own ICAO code
    assert airlines_dataset.by_icao["ZZO"].name == "Old Express"


def test_keys_uppercase_but_record_keeps_source_case():
    ds = build_airlines(['1,"Lower Air",\\N,"lx","lxa","LOWER","Germany","Y"'])
    assert ds.iata_codes == {"LX"}
    assert ds.icao_codes == {"LXA"}
    assert ds.by_iata["LX"].iata == "lx"


def test_datasets_are_read_only(airports_dataset):
    with pytest.raises(TypeError):
        airports_dataset.by_iata["NEW"] = airports_dataset.by_iata["LAX"]
    with pytest.raises(AttributeError):
        airports_dataset.iata_codes.add("NEW")


def test_empty_document_builds_empty_dataset():
    ds = build_airports(split_lines(""))
    assert ds.iata_codes == frozenset()
    assert dict(ds.by_icao) == {}


def test_skipped_lines_are_counted(clean_metrics, airports_dat):
    build_airports(split_lines(airports_dat))
    assert get_counter("records_skipped_total", {"kind": "airports", "reason": "short_line"}) == 1
    assert get_counter("records_skipped_total", {"kind": "airports", "reason": "no_code"}) == 1
