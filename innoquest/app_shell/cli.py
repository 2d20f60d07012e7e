import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from innoquest.adapters.random_source import SeededRandomSource, default_random_source
from innoquest.api.intake import parse_decision
from innoquest.components.weekly import build_audit_record, compute_weekly_result
from innoquest.core.ports.random import RandomPort
from innoquest.domain.entities import GameConfiguration
from innoquest.domain.errors import InvalidConfiguration
from innoquest.rules import load_rules

logger = logging.getLogger("cli")


def get_configuration(rules_path: str | None) -> GameConfiguration:
    try:
        return load_rules(rules_path)
    except FileNotFoundError as e:
        logger.error(str(e))
        sys.exit(1)
    except InvalidConfiguration as e:
        logger.error(f"Rules rejected: {e}")
        sys.exit(1)


def read_payload(source: str) -> dict[str, Any]:
    if source == "-":
        payload = json.load(sys.stdin)
    else:
        path = Path(source)
        if not path.exists():
            logger.error(f"Decision file {path} not found.")
            sys.exit(1)
        with open(path) as f:
            payload = json.load(f)

    if not isinstance(payload, dict):
        logger.error("Decision payload must be a JSON object.")
        sys.exit(1)
    return payload


def handle_simulate(args: argparse.Namespace) -> None:
    config = get_configuration(args.rules)
    payload = read_payload(args.decision)

    rng: RandomPort = default_random_source
    if args.seed is not None:
        rng = SeededRandomSource(seed=args.seed)

    try:
        decision, game_config = parse_decision(payload, config)
        result = compute_weekly_result(decision, game_config, rng)
    except InvalidConfiguration as e:
        logger.error(f"Decision rejected ({e.code}): {e}")
        sys.exit(1)

    output = build_audit_record(decision, result) if args.audit else result.to_dict()
    print(json.dumps(output, indent=2))


def handle_check_rules(args: argparse.Namespace) -> None:
    config = get_configuration(args.rules)
    print(f"Rules valid. Stages: {' -> '.join(config.stage_names)}")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="InnoQuest weekly engine CLI")
    parser.add_argument("--rules", help="Path to rules YAML (default: project rules file)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # simulate
    simulate_parser = subparsers.add_parser("simulate", help="Compute one team's week")
    simulate_parser.add_argument("decision", help="Decision JSON file, or - for stdin")
    simulate_parser.add_argument("--seed", type=int, help="Seed the R&D draw for a replay")
    simulate_parser.add_argument(
        "--audit", action="store_true", help="Print the audit record (input and result)"
    )

    # check-rules
    subparsers.add_parser("check-rules", help="Validate the rules file")

    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    if args.command == "simulate":
        handle_simulate(args)
    elif args.command == "check-rules":
        handle_check_rules(args)


if __name__ == "__main__":
    main()
