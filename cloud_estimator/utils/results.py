"""Export of simulation results."""

import json
from datetime import datetime
from pathlib import Path
from typing import Optional

import pandas as pd
from loguru import logger

from ..core.models import SimulationResult


def cloudlet_frame(result: SimulationResult) -> pd.DataFrame:
    """Cloudlet timings as a DataFrame ordered by cloudlet id."""
    return pd.DataFrame(
        {
            'id': [c.id for c in result.cloudlet_results],
            'start_time': [c.start_time for c in result.cloudlet_results],
            'finish_time': [c.finish_time for c in result.cloudlet_results],
            'execution_time': [c.execution_time for c in result.cloudlet_results],
        },
        columns=['id', 'start_time', 'finish_time', 'execution_time'],
    )


def host_frame(result: SimulationResult) -> pd.DataFrame:
    """Host layout as a DataFrame, VM ids joined with spaces."""
    return pd.DataFrame(
        {
            'host_id': [h.id for h in result.host_layout],
            'vm_count': [len(h.vms) for h in result.host_layout],
            'vms': [" ".join(str(vm) for vm in h.vms) for h in result.host_layout],
        },
        columns=['host_id', 'vm_count', 'vms'],
    )


def save_results(result: SimulationResult, output_dir: Optional[Path] = None) -> Path:
    """
    Save a simulation result to disk.

    Creates ``run_<timestamp>/`` under ``output_dir`` holding the wire
    payload as ``result.json`` plus ``cloudlets.csv`` and ``host_layout.csv``.

    Returns:
        Path to the run directory
    """
    base_dir = Path(output_dir) if output_dir is not None else Path("results")
    run_id = datetime.now().strftime("%Y%m%d_%H%M%S_%f")
    run_dir = base_dir / f"run_{run_id}"
    run_dir.mkdir(parents=True, exist_ok=True)

    results_file = run_dir / "result.json"
    with open(results_file, 'w') as f:
        json.dump(result.to_dict(), f, indent=2)

    cloudlet_frame(result).to_csv(run_dir / "cloudlets.csv", index=False)
    host_frame(result).to_csv(run_dir / "host_layout.csv", index=False)

    logger.info(f"Results saved to {run_dir}")

    return run_dir
