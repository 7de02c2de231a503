import argparse
import logging
import sys

from rte_toolbar.adapters.rules_toolbar import RulesToolbarAdapter
from rte_toolbar.components.toolbar import (
    PRESETS,
    ImageToolbarInput,
    MobileToolbarInput,
    NormalizeToolbarInput,
    RepairToolbarInput,
    ToolbarRulesPort,
    run_image,
    run_mobile,
    run_normalize,
    run_repair,
)
from rte_toolbar.rules.loader import load_rules, resolve_rules_path

logger = logging.getLogger("cli")


def get_rules_port(rules_path: str | None) -> ToolbarRulesPort | None:
    """Load rules when a rules file is available; built-in defaults otherwise."""
    path = resolve_rules_path(rules_path)
    if not path.exists():
        if rules_path is not None:
            logger.error(f"Rules file {path} not found.")
            sys.exit(1)
        logger.info("No rules file found; using built-in toolbar defaults.")
        return None

    try:
        rules = load_rules(path)
    except ValueError as e:
        logger.error(str(e))
        sys.exit(1)
    return RulesToolbarAdapter(rules)


def _source(args: argparse.Namespace) -> dict[str, str | None]:
    if args.preset is None and args.toolbar is None:
        logger.error("Specify --preset <name> or --toolbar <string>.")
        sys.exit(1)
    return {"preset": args.preset, "toolbar": args.toolbar}


def handle_normalize(rules: ToolbarRulesPort | None, args: argparse.Namespace) -> None:
    result = run_normalize(
        NormalizeToolbarInput(**_source(args), excluded=tuple(args.exclude)),
        rules=rules,
    )
    if not result.success:
        for err in result.errors:
            logger.error(err.message)
        sys.exit(1)
    print(result.toolbar)


def handle_repair(rules: ToolbarRulesPort | None, args: argparse.Namespace) -> None:
    result = run_repair(
        RepairToolbarInput(toolbar=args.toolbar, excluded=tuple(args.exclude)),
        rules=rules,
    )
    print(result.toolbar)


def handle_mobile(rules: ToolbarRulesPort | None, args: argparse.Namespace) -> None:
    result = run_mobile(
        MobileToolbarInput(**_source(args), excluded=tuple(args.exclude)),
        rules=rules,
    )
    if not result.success:
        for err in result.errors:
            logger.error(err.message)
        sys.exit(1)
    print(result.toolbar)


def handle_image(args: argparse.Namespace) -> None:
    print(run_image(ImageToolbarInput(items=tuple(args.items))).toolbar)


def handle_presets(rules: ToolbarRulesPort | None) -> None:
    presets = PRESETS if rules is None else rules.get_presets()

    for name, toolbar in presets.items():
        print(f"{name}: {toolbar}")


def _add_source_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--preset", help="Preset name (BASIC, STANDARD, FULL, MINIMAL)")
    parser.add_argument("--toolbar", help="Custom toolbar string")
    parser.add_argument(
        "--exclude", action="append", default=[], metavar="TOOL", help="Tool to remove"
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Rich text editor toolbar compiler")
    parser.add_argument("--rules", help="Path to toolbar rules file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # normalize
    normalize_parser = subparsers.add_parser("normalize", help="Normalize a toolbar")
    _add_source_args(normalize_parser)

    # repair
    repair_parser = subparsers.add_parser("repair", help="Repair a damaged toolbar string")
    repair_parser.add_argument("toolbar", help="Toolbar string to repair")
    repair_parser.add_argument(
        "--exclude", action="append", default=[], metavar="TOOL", help="Tool to remove"
    )

    # mobile
    mobile_parser = subparsers.add_parser("mobile", help="Derive the expanded mobile toolbar")
    _add_source_args(mobile_parser)

    # image
    image_parser = subparsers.add_parser("image", help="Build the image control toolbar")
    image_parser.add_argument("items", nargs="+", help="Image tools ('/' for manual layout)")

    # presets
    subparsers.add_parser("presets", help="List toolbar presets")

    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    if args.command == "image":
        handle_image(args)
        return

    rules = get_rules_port(args.rules)

    if args.command == "normalize":
        handle_normalize(rules, args)
    elif args.command == "repair":
        handle_repair(rules, args)
    elif args.command == "mobile":
        handle_mobile(rules, args)
    elif args.command == "presets":
        handle_presets(rules)


if __name__ == "__main__":
    main()
