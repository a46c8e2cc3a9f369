from brian_client.models.schemas import BUCKETS, TIMESERIES_LIST, Description, TimeSeries, TimeSeriesValue

from .helpers import make_record


def test_record_uses_wire_aliases():
    record = TimeSeries.model_validate(make_record("ABMI"))

    assert record.description.cdid == "ABMI"
    assert record.description.pre_unit == "£"
    assert record.description.sample_size == 0
    assert record.years[0].source_dataset == "ott"
    assert record.source_datasets == ["ott"]
    assert record.model_dump(by_alias=True)["sourceDatasets"] == ["ott"]


def test_nulls_and_missing_fields_decode_to_zero_values():
    record = TimeSeries.model_validate(
        {
            "description": {"title": None, "sampleSize": None},
            "years": None,
            "months": [{"date": "2000 JAN", "value": None}],
            "extra": "ignored",
        }
    )

    assert record.description == Description()
    assert record.type == ""
    assert record.years == []
    assert record.quarters == []
    assert record.months == [TimeSeriesValue(date="2000 JAN")]
    assert record.section is None


def test_section_is_passed_through():
    raw = make_record()
    raw["section"] = {"title": "Output", "data": [1, 2]}
    assert TimeSeries.model_validate(raw).section == {"title": "Output", "data": [1, 2]}


def test_bucket_lookup():
    record = TimeSeries.model_validate(make_record())
    assert BUCKETS == ("years", "months", "quarters")
    assert record.bucket("quarters")[0].quarter == "Q1"


def test_list_adapter_validates_records():
    records = TIMESERIES_LIST.validate_python([make_record("ABMI"), make_record("YBHA")])
    assert [r.description.cdid for r in records] == ["ABMI", "YBHA"]
