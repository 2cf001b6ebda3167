#!/usr/bin/env python
# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

"""Plot initial and final profiles of saved advection runs.

Usage:
    python scripts/plot_advection.py RUN.json [RUN.json ...] [-o out.pdf]
"""

import argparse
import os
import sys

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import seaborn as sns

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from advection1d.io import load_run

sns.set_theme(style="whitegrid", context="paper", font_scale=1.1)


def plot_runs(paths, out):
    fig, ax = plt.subplots(figsize=(6, 3.5))
    first = None
    for path in paths:
        run = load_run(path)
        p = run["params"]
        # ghost cells are not part of the physical solution
        ng = p.get("Ng", 1)
        x = run["x"][ng:-ng]
        if first is None:
            first = run
            ax.plot(x, run["u_initial"][ng:-ng], color="k", ls=":", lw=1.0,
                    label="initial")
        ax.plot(x, run["u_final"][ng:-ng],
                label=f"Nx={p['Nx']}, C={run['courant']:.2f}")

    ax.set_xlabel(r"$x$")
    ax.set_ylabel(r"$u$")
    if first is not None:
        ax.set_title(rf"$t = {first['t_final']:g}$")
    ax.legend(fontsize="small")
    fig.tight_layout()
    fig.savefig(out)
    plt.close(fig)
    print(f"Saved {out}")


def main(argv=None):
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("runs", nargs="+", help="run JSON files from save_run")
    parser.add_argument("-o", "--output", default="advection.pdf")
    args = parser.parse_args(argv)
    plot_runs(args.runs, args.output)


if __name__ == "__main__":
    main()
