"""
Command-line interface for batch model selection from a table of fit summaries.
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Optional

from .constants import (
    AUTO_CRITERION,
    CONFIDENCE_SET_FILE,
    CRITERIA,
    DEFAULT_CONFIDENCE_LEVEL,
    DEFAULT_CRITERION,
    DEFAULT_NONFINITE_POLICY,
    LOGLIK_ALIASES,
    LRT_TABLE_FILE,
    NOBS_ALIASES,
    NONFINITE_POLICIES,
    NPARAM_ALIASES,
    SELECTION_TABLE_FILE,
)
from .data_loader import coerce_numeric_columns, load_summary_table
from .extraction import candidates_from_frame, resolve_column
from .nested import likelihood_ratio_table
from .ranking import confidence_set, select_models, selection_frame


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ecoselect",
        description="Rank candidate models by AIC/AICc/BIC and compute Akaike weights",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
The input table has one row per fitted model with columns for the model
name, log-likelihood, number of parameters and number of observations
(e.g. model, logLik, df, nobs).

Examples:
  ecoselect --input fits.csv --criterion auto --outdir results/

  ecoselect --input fits.xlsx --sheet-name selection --nobs 200 \\
    --lrt m_additive m_interaction --outdir results/
        """
    )

    # Required arguments
    parser.add_argument(
        "--input",
        required=True,
        help="Path to CSV or XLSX table of fit summaries"
    )

    # Optional arguments
    parser.add_argument(
        "--criterion",
        choices=CRITERIA + [AUTO_CRITERION],
        default=DEFAULT_CRITERION,
        help=f"Information criterion (default: {DEFAULT_CRITERION}; auto = AICc when n/k < 40)"
    )
    parser.add_argument(
        "--nobs",
        type=int,
        default=None,
        help="Number of observations shared by all models (if the table has no nobs column)"
    )
    parser.add_argument(
        "--nonfinite",
        choices=NONFINITE_POLICIES,
        default=DEFAULT_NONFINITE_POLICY,
        help="What to do with NaN/inf log-likelihoods (default: raise)"
    )
    parser.add_argument(
        "--no-observation-check",
        action="store_true",
        help="Do not require equal observation counts across models"
    )
    parser.add_argument(
        "--confidence-level",
        type=float,
        default=DEFAULT_CONFIDENCE_LEVEL,
        help=f"Cumulative weight of the model confidence set (default: {DEFAULT_CONFIDENCE_LEVEL})"
    )
    parser.add_argument(
        "--lrt",
        nargs=2,
        action="append",
        metavar=("RESTRICTED", "FULL"),
        default=[],
        help="Likelihood-ratio test between two nested models (repeatable)"
    )
    parser.add_argument(
        "--sheet-name",
        default=None,
        help="Sheet name for XLSX files (default: first sheet)"
    )
    parser.add_argument(
        "--outdir",
        default="outputs",
        help="Output directory for reports (default: outputs/)"
    )
    return parser


def main(argv: Optional[list[str]] = None) -> None:
    """
    Main CLI entry point.

    Loads fit summaries, ranks them and writes the selection reports.
    """
    args = build_parser().parse_args(argv)

    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    print(f"Loading fit summaries from: {args.input}")
    df = load_summary_table(args.input, sheet_name=args.sheet_name)
    numeric_cols = [
        col
        for col in (resolve_column(df, aliases) for aliases in (LOGLIK_ALIASES, NPARAM_ALIASES, NOBS_ALIASES))
        if col is not None
    ]
    df = coerce_numeric_columns(df, numeric_cols)
    candidates = candidates_from_frame(df, num_observations=args.nobs)
    print(f"Candidates loaded: {len(candidates)}")

    print("\nRanking candidates...")
    rows = select_models(
        candidates,
        criterion=args.criterion,
        nonfinite=args.nonfinite,
        check_observations=not args.no_observation_check,
    )
    selected = confidence_set(rows, level=args.confidence_level)

    # only ranked (not dropped) candidates can be tested
    lrt_table = None
    if args.lrt:
        ranked = {r.identifier for r in rows}
        kept = [c for c in candidates if c.identifier in ranked]
        lrt_table = likelihood_ratio_table(kept, [tuple(pair) for pair in args.lrt])

    selection_frame(rows).to_csv(outdir / SELECTION_TABLE_FILE, index=False)
    best = rows[0]
    print(f"✓ Best model: {best.identifier} ({best.criterion} = {best.value:.2f}, weight = {best.weight:.3f})")

    selection_frame(selected).to_csv(outdir / CONFIDENCE_SET_FILE, index=False)
    print(f"✓ {len(selected)} model(s) in the {args.confidence_level:.0%} confidence set")

    if lrt_table is not None:
        print("\nWriting likelihood-ratio tests...")
        lrt_table.to_csv(outdir / LRT_TABLE_FILE, index=False)
        print(f"✓ {len(args.lrt)} likelihood-ratio test(s) complete")

    print(f"\n✅ Model selection complete! Reports saved to: {outdir.resolve()}")
    print("\nGenerated files:")
    for csv_file in sorted(outdir.glob("*.csv")):
        print(f"  - {csv_file.name}")


if __name__ == "__main__":
    main()
