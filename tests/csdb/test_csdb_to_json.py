"""Convert each CSDB fixture and compare the response with its golden file."""
import pytest

from brian_client import config
from brian_client.services import fixtures
from brian_client.services.comparator import compare_raw, compare_timeseries
from brian_client.services.transport import BrianClient

pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(
        not config.outputs_dir().is_dir(),
        reason=f"{config.outputs_dir()} not found, unzip outputs.zip and start project-brian to run",
    ),
]


@pytest.mark.parametrize("dataset", config.DATASETS)
def test_generate_csdb_timeseries(client: BrianClient, dataset: str):
    expected = fixtures.load_expected(dataset)
    actual = client.convert(dataset)
    compare_timeseries(actual, expected, dataset=dataset)


@pytest.mark.skipif(not config.strict_compare(), reason="set BRIAN_STRICT_COMPARE=1 to compare whole entries")
@pytest.mark.parametrize("dataset", config.DATASETS)
def test_generate_csdb_entries_untyped(client: BrianClient, dataset: str):
    expected = fixtures.load_expected_raw(dataset)
    actual = client.convert_raw(dataset)
    compare_raw(actual, expected, dataset=dataset)
