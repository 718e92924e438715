import logging
import os
from typing import Iterable

import pandas as pd

from switchcover.utils.Errors import InvalidIndexError

logger = logging.getLogger(__name__)

DATASET_COLUMNS = ['flow_id', 'switch_id']


def build_paths(pairs: Iterable[tuple[int, int]]) -> tuple[int, int, list[list[int]]]:
    """
    Turns (flow_id, switch_id) pairs into per-flow paths.
    Both counts are 1 + the largest id seen, so ids without any pair become flows with an empty path or switches
    no flow references. Pair order is kept inside each path, duplicates included.
    :return: n_flows, n_switches, paths
    """
    edges = []
    max_flow, max_switch = -1, -1
    for flow, sw in pairs:
        if flow < 0 or sw < 0:
            raise InvalidIndexError(f'negative id in pair ({flow}, {sw})')
        edges.append((flow, sw))
        max_flow = max(max_flow, flow)
        max_switch = max(max_switch, sw)

    n_flows = max_flow + 1
    n_switches = max_switch + 1
    paths: list[list[int]] = [[] for _ in range(n_flows)]
    for flow, sw in edges:
        paths[flow].append(sw)

    for flow, path in enumerate(paths):
        if not path:
            logger.warning('flow %d has no switches in its path and can never be covered', flow)

    return n_flows, n_switches, paths


def load_dataset_csv(filename: str) -> tuple[int, int, list[list[int]]]:
    """
    Loads a dataset from CSV. The first line is a header, every other line is flow_id,switch_id (0-based).
    Blank lines and lines missing one of the two fields are skipped.
    :return: n_flows, n_switches, paths
    """
    try:
        df = pd.read_csv(filename, usecols=[0, 1], header=0, skip_blank_lines=True)
    except pd.errors.EmptyDataError:
        raise ValueError(f'empty file {filename}')
    df.columns = DATASET_COLUMNS

    df = df.dropna()
    if df.empty:
        raise ValueError(f'no valid edges parsed from file {filename}')

    try:
        values = df.astype(float)
    except ValueError:
        raise ValueError(f'non-numeric id in file {filename}')
    if (values % 1 != 0).any().any():
        raise ValueError(f'non-integral id in file {filename}')
    values = values.astype(int)

    n_flows, n_switches, paths = build_paths(zip(values['flow_id'].tolist(), values['switch_id'].tolist()))
    logger.info('Loaded dataset from %s: %d flows, %d switches', filename, n_flows, n_switches)
    return n_flows, n_switches, paths


def write_dataset_csv(paths: list[list[int]], filename: str) -> None:
    """Writes paths as flow_id,switch_id rows. Flows with an empty path produce no row."""
    rows = [(flow_id, switch_id) for flow_id, path in enumerate(paths) for switch_id in path]
    directory = os.path.dirname(filename)
    if directory:
        os.makedirs(directory, exist_ok=True)
    pd.DataFrame(rows, columns=DATASET_COLUMNS).to_csv(filename, index=False)
