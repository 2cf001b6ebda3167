# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

"""Shared utilities for sweep scripts: save/load results, logging, summary tables."""

import csv
import logging
import os

from advection1d.io import save_run

SUMMARY_FIELDS = ("Nx", "cfl", "scheme", "bc", "n_steps",
                  "l1_error", "l2_error", "linf_error", "mass_drift")


def save_sweep_results(results, outdir):
    """Save per-case JSON files and a summary CSV.

    Args:
        results: list of result dicts from single_run.
        outdir: output directory path.

    Returns:
        list of summary row dicts.
    """
    os.makedirs(outdir, exist_ok=True)
    summary_rows = []

    for r in results:
        p = r["params"]
        scheme = p.get("scheme", "upwind")
        bc = p.get("bc", "periodic")
        fname = f"Nx{p['Nx']}_C{r['courant']:.3f}_{scheme}_{bc}.json"
        save_run(r, os.path.join(outdir, fname))

        summary_rows.append({
            "Nx": p["Nx"],
            "cfl": r["courant"],
            "scheme": scheme,
            "bc": bc,
            "n_steps": r["n_steps"],
            "l1_error": r["l1_error"],
            "l2_error": r["l2_error"],
            "linf_error": r["linf_error"],
            "mass_drift": r["mass_final"] - r["mass_initial"],
        })

    if summary_rows:
        csv_path = os.path.join(outdir, "summary.csv")
        with open(csv_path, "w", newline="") as f:
            writer = csv.DictWriter(f, fieldnames=SUMMARY_FIELDS)
            writer.writeheader()
            writer.writerows(summary_rows)

    return summary_rows


def load_summary(csv_path):
    """Read a summary CSV into a list of dicts with proper types."""
    rows = []
    with open(csv_path, "r") as f:
        reader = csv.DictReader(f)
        for row in reader:
            typed = {}
            for k, v in row.items():
                if k in ("Nx", "n_steps"):
                    typed[k] = int(v)
                elif k in ("scheme", "bc"):
                    typed[k] = v
                else:
                    typed[k] = float(v)
            rows.append(typed)
    return rows


def configure_logging(outdir, run_name, level=logging.INFO):
    """Log the 'advection1d' package to <outdir>/<run_name>.log and the console.

    Every record is tagged with run_name. Calling again with the same
    run_name swaps the file handler rather than stacking a second one.

    Returns:
        the configured logger.
    """
    os.makedirs(outdir, exist_ok=True)
    logger = logging.getLogger("advection1d")
    logger.setLevel(level)

    fmt = logging.Formatter(
        f"%(asctime)s %(levelname)s [{run_name}] %(name)s: %(message)s"
    )

    log_path = os.path.abspath(os.path.join(outdir, f"{run_name}.log"))
    for h in list(logger.handlers):
        if isinstance(h, logging.FileHandler) and h.baseFilename == log_path:
            logger.removeHandler(h)
            h.close()

    fh = logging.FileHandler(log_path)
    fh.setLevel(level)
    fh.setFormatter(fmt)
    logger.addHandler(fh)

    consoles = [h for h in logger.handlers
                if type(h) is logging.StreamHandler]
    if not consoles:
        consoles = [logging.StreamHandler()]
        logger.addHandler(consoles[0])
    for ch in consoles:
        ch.setLevel(level)
        ch.setFormatter(fmt)

    return logger


def print_summary_table(summary_rows):
    """Print a formatted summary table to stdout."""
    header = (f"{'Nx':>6} {'C':>6} {'scheme':>9} {'bc':>9} {'steps':>7} "
              f"{'L1':>10} {'Linf':>10} {'dmass':>10}")
    print(header)
    print("-" * len(header))
    for row in summary_rows:
        print(
            f"{row['Nx']:>6d} {row['cfl']:>6.3f} {row['scheme']:>9} {row['bc']:>9} "
            f"{row['n_steps']:>7d} {row['l1_error']:>10.3e} "
            f"{row['linf_error']:>10.3e} {row['mass_drift']:>10.2e}"
        )
