"""Command line helpers for KingdomForge."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import replace
from typing import Sequence

from rich.console import Console

from .app import KingdomApp
from .config import KingdomForgeConfig
from .domain.cards import Expansion, KingdomCard
from .domain.exceptions import GenSetupError
from .domain.setups import BaneCount, ProjectCount, SetupConfig
from .formatting import format_code, format_error, format_histograms, format_setup
from .loaders import setup_to_dict
from .naming import random_name
from .validators import validate_catalog, validate_tables

console = Console()
error_console = Console(stderr=True)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="kingdomforge", description="Generate dominion kingdoms")

    limiting = parser.add_argument_group("limiting")
    limiting.add_argument(
        "-e",
        "--include-expansions",
        nargs="+",
        metavar="EXPANSION",
        type=Expansion,
        help="Expansions from which to take cards",
    )
    limiting.add_argument(
        "-p",
        "--project-count",
        type=int,
        choices=[int(count) for count in ProjectCount],
        help="Include a number of projects",
    )
    limiting.add_argument(
        "--bane-count",
        type=int,
        choices=[int(count) for count in BaneCount],
        help="Include a number of bane expansion cards (experimental/custom)",
    )
    limiting.add_argument(
        "-b",
        "--ban-cards",
        nargs="+",
        metavar="CARD",
        type=KingdomCard,
        help="Ensure these cards are not included",
    )
    limiting.add_argument(
        "-c",
        "--include-cards",
        nargs="+",
        metavar="CARD",
        type=KingdomCard,
        help="Ensure these cards are included",
    )
    limiting.add_argument("--seed", type=int, help="Seed the random source for a reproducible setup")

    output = parser.add_argument_group("output")
    output.add_argument("--code", action="store_true", help="Output history code with the setup (largely) filled out")
    output.add_argument("--raw", action="store_true", help="Output raw setup structure")
    output.add_argument("--json", action="store_true", help="Output the setup as JSON")
    output.add_argument("--pretty", action="store_true", help="Prettify output to make physical setup easier")
    output.add_argument("--hists", action="store_true", help="Write histograms")
    output.add_argument("--name", action="store_true", help="Generate a kingdom name")
    return parser


def run_generate(argv: Sequence[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    if not any((args.code, args.raw, args.json, args.pretty, args.hists, args.name)):
        args.pretty = True

    config = KingdomForgeConfig.from_env()
    logging.basicConfig(level=config.generator.log_level)
    if args.seed is not None:
        config.generator.rng_seed = args.seed

    app = KingdomApp(config)
    try:
        setup = app.generate(_setup_config(args, config.default_setup))
    except GenSetupError as exc:
        error_console.print("Error generating kingdom!\n", markup=False, highlight=False)
        error_console.print(format_error(exc), markup=False, highlight=False, soft_wrap=True)
        sys.exit(1)

    name = "Game"
    if args.name:
        name = random_name(setup, seed=args.seed)
        console.print(f"== {name} ==", markup=False)

    if args.pretty:
        _print_section("SETUP", format_setup(setup, app.catalog))
    if args.raw:
        _print_section("RAW", repr(setup))
    if args.json:
        _print_section("JSON", json.dumps(setup_to_dict(setup), indent=2))
    if args.code:
        _print_section("CODE", format_code(name, setup))
    if args.hists:
        _print_section("HISTS", format_histograms(setup, app.catalog))


def run_validate(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="KingdomForge catalog validator")
    parser.parse_args(argv)

    app = KingdomApp(KingdomForgeConfig.from_env())
    issues = validate_tables() + validate_catalog(app.catalog)
    if issues:
        error_console.print("Catalog problems found:", markup=False)
        for issue in issues:
            error_console.print(f"- {issue}", markup=False, highlight=False)
        sys.exit(1)
    console.print(
        f"[bold green]Catalog is valid[/bold green]: {len(app.catalog.kingdom_cards)} kingdom cards, "
        f"{len(app.catalog.projects)} projects, {len(app.catalog.bane_cards)} bane cards"
    )


def _setup_config(args: argparse.Namespace, defaults: SetupConfig) -> SetupConfig:
    overrides = {}
    if args.include_expansions is not None:
        overrides["include_expansions"] = frozenset(args.include_expansions)
    if args.ban_cards is not None:
        overrides["ban_cards"] = frozenset(args.ban_cards)
    if args.include_cards is not None:
        overrides["include_cards"] = frozenset(args.include_cards)
    if args.project_count is not None:
        overrides["project_count"] = ProjectCount(args.project_count)
    if args.bane_count is not None:
        overrides["bane_count"] = BaneCount(args.bane_count)
    return replace(defaults, **overrides)


def _print_section(title: str, body: str) -> None:
    console.print(f"------------------ {title} ------------------\n", markup=False)
    console.print(body, markup=False, highlight=False, soft_wrap=True)
    console.print()
