"""Capture golden responses from a running project-brian service.

Usage:
    brian-capture [DATASET ...] [--base-url URL] [--no-validate] [-v]

Each dataset's ``resources/inputs/<name>.csdb`` is posted to the service and
the JSON response is written, pretty printed, to
``resources/outputs/<name>-csdb.json``, replacing any previous baseline. The
run stops at the first failure so a batch of baselines is never left half
regenerated from two different service versions.
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from brian_client import config
from brian_client.errors import BrianClientError
from brian_client.services import fixtures
from brian_client.services.transport import BrianClient, decode_timeseries


def capture_dataset(client: BrianClient, name: str, validate: bool = True) -> Path:
    payload = client.convert_raw(name)
    if validate:
        decode_timeseries(payload, dataset=name)
    return fixtures.write_expected(name, payload)


def capture_baselines(
    datasets: Iterable[str] = config.DATASETS,
    client: Optional[BrianClient] = None,
    validate: bool = True,
) -> List[Path]:
    """Regenerate the golden files for ``datasets`` in order.

    Any error propagates immediately; datasets after the failing one are
    left untouched.
    """

    owned = client is None
    client = client if client is not None else BrianClient()
    written: List[Path] = []
    try:
        for name in datasets:
            print(f"capturing project-brian response for dataset: {name}")
            written.append(capture_dataset(client, name, validate=validate))
    finally:
        if owned:
            client.close()
    return written


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="brian-capture",
        description="Record project-brian responses as golden JSON files.",
    )
    parser.add_argument(
        "datasets",
        nargs="*",
        metavar="DATASET",
        help=f"datasets to capture (default: all of {', '.join(config.DATASETS)})",
    )
    parser.add_argument("--base-url", default=None, help="service base URL (default: $PROJECT_BRIAN_URL)")
    parser.add_argument(
        "--no-validate",
        action="store_true",
        help="write responses even if they do not match the time series shape",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    args = parser.parse_args(argv)
    unknown = [name for name in args.datasets if name not in config.DATASETS]
    if unknown:
        parser.error(f"unknown dataset(s): {', '.join(unknown)}")
    return args


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    datasets = args.datasets or list(config.DATASETS)

    try:
        with BrianClient(base_url=args.base_url) as client:
            capture_baselines(datasets, client=client, validate=not args.no_validate)
    except BrianClientError as exc:
        print(f"capture aborted: {exc}", file=sys.stderr)
        return 1
    print("finished project-brian responses")
    return 0


if __name__ == "__main__":
    sys.exit(main())
