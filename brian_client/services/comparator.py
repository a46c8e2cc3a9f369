"""Positional comparison of converted time series against a golden file.

Records are matched by index, and so are the values inside each bucket;
nothing is reordered. The first mismatch raises ``MismatchError`` with its
location and a structural diff of the two values.
"""
from __future__ import annotations

import json
import logging
from typing import Any, List, Optional, Sequence

from brian_client.errors import MismatchError
from brian_client.models.schemas import BUCKETS, TimeSeries
from brian_client.services import jsondiff

log = logging.getLogger(__name__)

ROOT = "timeseries"
DIFF_LIMIT = 50


def _pretty(value: Any) -> str:
    return json.dumps(jsondiff.normalize(value), indent=2, sort_keys=True)


def _mismatch(
    message: str,
    path: str,
    expected: Any,
    actual: Any,
    dataset: Optional[str],
    index: Optional[int] = None,
    field: Optional[str] = None,
    sub_index: Optional[int] = None,
    show_values: bool = True,
) -> MismatchError:
    differences = jsondiff.diff(expected, actual, path=path)
    sections = [f"Info: {path}", "Diff:\n" + jsondiff.render(differences, limit=DIFF_LIMIT)]
    if show_values:
        sections.append("Expected:\n" + _pretty(expected))
        sections.append("Actual:\n" + _pretty(actual))
    log.debug("mismatch at %s (%d differences)", path, len(differences))
    return MismatchError(
        message,
        path=path,
        dataset=dataset,
        index=index,
        field=field,
        sub_index=sub_index,
        differences=differences,
        report="\n\n".join(sections),
    )


def _length_mismatch(
    path: str,
    expected: Sequence[Any],
    actual: Sequence[Any],
    dataset: Optional[str],
    index: Optional[int] = None,
    field: Optional[str] = None,
) -> MismatchError:
    first = min(len(expected), len(actual))
    return MismatchError(
        f"{path} has length {len(actual)}, expected {len(expected)} "
        f"(first unmatched index {first})",
        path=path,
        dataset=dataset,
        index=index if index is not None else first,
        field=field,
        sub_index=first if field is not None else None,
        report=f"Info: {jsondiff.join_index(path, first)}",
    )


def compare_timeseries(
    actual: Sequence[TimeSeries],
    expected: Sequence[TimeSeries],
    dataset: Optional[str] = None,
) -> None:
    """Raise ``MismatchError`` at the first difference between two record lists.

    For each record: ``description``, then ``type``, then the ``years``,
    ``months`` and ``quarters`` buckets, each checked for length before its
    values are compared position by position. ``sourceDatasets`` and
    ``section`` are not compared.
    """

    if len(actual) != len(expected):
        raise _length_mismatch(ROOT, expected, actual, dataset)

    for index, (act, exp) in enumerate(zip(actual, expected)):
        record_path = jsondiff.join_index(ROOT, index)

        if act.description != exp.description:
            raise _mismatch(
                f"description does not match at {record_path}",
                jsondiff.join_key(record_path, "description"),
                exp.description,
                act.description,
                dataset,
                index=index,
                field="description",
            )

        if act.type != exp.type:
            raise _mismatch(
                f"type does not match at {record_path}",
                jsondiff.join_key(record_path, "type"),
                exp.type,
                act.type,
                dataset,
                index=index,
                field="type",
                show_values=False,
            )

        for bucket in BUCKETS:
            compare_values(act.bucket(bucket), exp.bucket(bucket), index, bucket, dataset)

    log.debug("%s: %d time series match", dataset or "<unnamed>", len(actual))


def compare_values(
    actual: Sequence[Any],
    expected: Sequence[Any],
    index: int,
    bucket: str,
    dataset: Optional[str] = None,
) -> None:
    bucket_path = jsondiff.join_key(jsondiff.join_index(ROOT, index), bucket)
    if len(actual) != len(expected):
        raise _length_mismatch(bucket_path, expected, actual, dataset, index=index, field=bucket)

    for sub_index, (act, exp) in enumerate(zip(actual, expected)):
        if act != exp:
            path = jsondiff.join_index(bucket_path, sub_index)
            raise _mismatch(
                f"values do not match at {path}",
                path,
                exp,
                act,
                dataset,
                index=index,
                field=bucket,
                sub_index=sub_index,
            )


def compare_raw(actual: List[Any], expected: List[Any], dataset: Optional[str] = None) -> None:
    """Untyped whole-entry comparison of two generic JSON arrays.

    Unlike ``compare_timeseries`` this also covers ``sourceDatasets``,
    ``section`` and any field the record models do not know about.
    """

    if len(actual) != len(expected):
        raise _length_mismatch(ROOT, expected, actual, dataset)

    for index, (act, exp) in enumerate(zip(actual, expected)):
        path = jsondiff.join_index(ROOT, index)
        if jsondiff.diff(exp, act):
            raise _mismatch(
                f"comparison failure for entry {index}",
                path,
                exp,
                act,
                dataset,
                index=index,
            )
