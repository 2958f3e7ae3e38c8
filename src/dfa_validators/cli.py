"""
Command surface: validate one string against a built-in language.

    dfa-validate floating-point 12.5e-3
    dfa-validate name-minus-one Alicf Alice
    dfa-validate --list
"""
import argparse
import sys
from typing import List, Optional

import structlog

from dfa_validators.config import get_settings
from dfa_validators.dfa import scan
from dfa_validators.languages import CATALOG, get_specification
from dfa_validators.logging import setup_logging
from dfa_validators.verdicts import AlphabetViolation

logger = structlog.get_logger(__name__)

EXIT_ALPHABET_VIOLATION = 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="dfa-validate",
                                     description="Check a string against a built-in finite automaton.",
                                     epilog="Options go before LANGUAGE; everything after it is read verbatim, "
                                            "so inputs may start with '-' (e.g. dfa-validate floating-point -1e5).")
    parser.add_argument("-v", "--verbose", action="store_true", help="log at DEBUG level")
    parser.add_argument("--list", action="store_true", help="list the available languages and exit")
    subparsers = parser.add_subparsers(dest="language", metavar="LANGUAGE")
    for name, spec in CATALOG.items():
        subparser = subparsers.add_parser(name, help=spec.description, description=spec.description)
        subparser.add_argument("input", help="the string to scan")
        if spec.requires_context:
            subparser.add_argument("context", metavar="name", help="the reference string to compare with")
    return parser


def protect_positionals(argv: List[str]) -> List[str]:
    """
    Insert "--" right after the language name, so inputs starting with '-' (signed numbers,
     "-x") are never read as options. Only leading options are skipped while looking for the name.
    """
    for i, arg in enumerate(argv):
        if arg in CATALOG:
            if argv[i + 1:i + 2] == ["--"]:
                return argv
            return argv[:i + 1] + ["--"] + argv[i + 1:]
        if not arg.startswith("-"):
            break
    return argv


def list_languages() -> str:
    width = max(len(name) for name in CATALOG)
    return "\n".join(f"{name.ljust(width)}  {spec.description}" for name, spec in CATALOG.items())


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    if argv is None:
        argv = sys.argv[1:]
    args = parser.parse_args(protect_positionals(list(argv)))

    settings = get_settings()
    if args.verbose:
        settings = settings.model_copy(update={"log_level": "DEBUG"})
    setup_logging(settings)

    if args.list:
        print(list_languages())
        return 0
    if args.language is None:
        parser.error("a language must be provided")

    spec = get_specification(args.language)
    context = getattr(args, "context", None)
    verdict = scan(spec, args.input, context)
    logger.debug("scan finished", language=spec.name, input=args.input, verdict=type(verdict).__name__)

    if isinstance(verdict, AlphabetViolation):
        logger.info("alphabet violation", language=spec.name, index=verdict.index, character=verdict.character)
        print(f"Invalid character {verdict.character!r} at index {verdict.index} in input string {args.input}",
              file=sys.stderr)
        return EXIT_ALPHABET_VIOLATION
    print(f"The input string is {verdict}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
