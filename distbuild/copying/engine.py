"""Static asset copy engine."""

from __future__ import annotations

import logging

from ..core.models import BuildConfig, BuildReport, CopyResult, CopyStatus, CopyTask
from .io import atomic_copy, copy_tree, ensure_dir

logger = logging.getLogger(__name__)


def copy_task(task: CopyTask, *, dist_label: str) -> CopyResult:
    """Copy a single file, or report it missing.

    Args:
        task: Copy task to execute
        dist_label: Output directory name used in status messages

    Returns:
        Result of the task
    """
    source = task.source_path
    if not source.exists():
        logger.error(f"File not found: {task.name}")
        return CopyResult(name=task.name, status=CopyStatus.MISSING)

    logger.debug(f"Copying {source} → {task.output_path}")
    if source.is_dir():
        copy_tree(source, task.output_path)
    else:
        atomic_copy(source, task.output_path)
    logger.info(f"{task.name} copied to {dist_label}")

    return CopyResult(
        name=task.name, status=CopyStatus.COPIED, destination=task.output_path
    )


def copy_all(config: BuildConfig) -> BuildReport:
    """Copy every configured file into the output directory.

    Missing sources are reported and skipped; any other error propagates.

    Args:
        config: Build configuration

    Returns:
        Report with one result per configured file, in order
    """
    out_dir = config.output_dir
    label = _dist_label(config)
    ensure_dir(out_dir)
    logger.debug(f"Output directory ready: {out_dir}")

    report = BuildReport(
        output_dir=out_dir,
        results=[copy_task(task, dist_label=label) for task in config.tasks()],
    )

    logger.debug(
        f"Copied {len(report.copied)} of {len(report.results)} file(s) to {out_dir}"
    )
    return report


def _dist_label(config: BuildConfig) -> str:
    return config.dist_dir.name or str(config.dist_dir)
