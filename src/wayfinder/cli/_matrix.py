"""``wayfinder matrix``: print the render rewrite policy table."""

import argparse

from wayfinder.policy import RENDER_SKIP_REWRITE


def run_matrix(args: argparse.Namespace) -> None:  # noqa: ARG001
    """Print HOSTING, PHASE and SKIP-REWRITE for every table cell."""
    rows = [
        (hosting.value, phase.value, "yes" if skip else "no")
        for (hosting, phase), skip in RENDER_SKIP_REWRITE.items()
    ]
    max_hosting = max(max(len(r[0]) for r in rows), 7)  # "HOSTING" header
    max_phase = max(max(len(r[1]) for r in rows), 5)  # "PHASE" header

    fmt = f"{{:<{max_hosting}}}  {{:<{max_phase}}}  {{}}"
    print(fmt.format("HOSTING", "PHASE", "SKIP-REWRITE"))
    print("-" * (max_hosting + max_phase + 4 + len("SKIP-REWRITE")))
    for row in rows:
        print(fmt.format(*row))
