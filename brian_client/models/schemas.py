from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator
from typing import Any, List


class _WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @field_validator("*", mode="before")
    @classmethod
    def _null_as_default(cls, value: Any, info) -> Any:
        # The service emits null for absent fields; decode them as the zero value.
        field = cls.model_fields.get(info.field_name)
        if value is None and field is not None and field.annotation is not Any:
            return field.get_default(call_default_factory=True)
        return value


class TimeSeriesValue(_WireModel):
    date: str = ""
    value: str = ""
    year: str = ""
    month: str = ""
    quarter: str = ""
    source_dataset: str = Field("", alias="sourceDataset")


class Description(_WireModel):
    title: str = ""
    cdid: str = ""
    unit: str = ""
    pre_unit: str = Field("", alias="preUnit")
    source: str = ""
    date: str = ""
    number: str = ""
    sample_size: int = Field(0, alias="sampleSize")


class TimeSeries(_WireModel):
    description: Description = Field(default_factory=Description)
    type: str = ""
    years: List[TimeSeriesValue] = Field(default_factory=list)
    quarters: List[TimeSeriesValue] = Field(default_factory=list)
    months: List[TimeSeriesValue] = Field(default_factory=list)
    source_datasets: List[str] = Field(default_factory=list, alias="sourceDatasets")
    section: Any = None

    def bucket(self, name: str) -> List[TimeSeriesValue]:
        return getattr(self, name)


BUCKETS = ("years", "months", "quarters")

TIMESERIES_LIST = TypeAdapter(List[TimeSeries])
