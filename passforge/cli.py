#!/usr/bin/env python3
"""
passforge CLI - Command-line interface for password and passphrase generation.
"""

import argparse
import dataclasses
import getpass
import logging
import sys

from passforge import __version__
from passforge.config import Config
from passforge.core.analyzer import analyze_password
from passforge.core.generator import generate
from passforge.core.log import setup_logging
from passforge.core.random_source import (
    ContractViolation,
    RandomSourceError,
    default_source,
)
from passforge.core.selftest import RandomSourceTests
from passforge.core.settings import Mode

# Maps CLI dests to PasswordSettings fields; None means "keep config value"
_OVERRIDES = {
    "length": "length",
    "words": "word_count",
    "separator": "separator",
    "capitalize": "capitalize_words",
    "add_numbers": "add_numbers",
    "upper": "include_uppercase",
    "lower": "include_lowercase",
    "digits": "include_numbers",
    "symbols": "include_symbols",
    "exclude_similar": "exclude_similar",
    "exclude_ambiguous": "exclude_ambiguous",
    "min_digits": "min_digits",
    "min_symbols": "min_symbols",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="passforge",
        description="passforge - secure password and passphrase generator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                           # 5 random passwords (config defaults)
  %(prog)s -l 24 --no-symbols        # 24 chars, letters and digits only
  %(prog)s -p -w 6 --add-numbers     # 6-word passphrases with a number
  %(prog)s -p --wordlist eff.txt     # Passphrases from an EFF wordlist
  %(prog)s --analyze                 # Analyze a password typed at the prompt
  %(prog)s --self-test               # Statistical checks of the RNG
        """
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    # Generation options
    gen_group = parser.add_argument_group('Generation')
    gen_group.add_argument("-n", "--count", type=int, default=None,
                           help="Number of secrets (default: config, 5)")
    gen_group.add_argument("-p", "--passphrase", action="store_const", dest="mode",
                           const=Mode.PASSPHRASE.value, default=None,
                           help="Generate passphrases")
    gen_group.add_argument("-r", "--random", action="store_const", dest="mode",
                           const=Mode.RANDOM.value,
                           help="Generate random-character passwords")

    # Random mode options
    rand_group = parser.add_argument_group('Random passwords')
    rand_group.add_argument("-l", "--length", type=int, default=None,
                            help="Password length (default: 16)")
    rand_group.add_argument("--no-upper", dest="upper", action="store_false", default=None,
                            help="Exclude uppercase letters")
    rand_group.add_argument("--no-lower", dest="lower", action="store_false", default=None,
                            help="Exclude lowercase letters")
    rand_group.add_argument("--no-digits", dest="digits", action="store_false", default=None,
                            help="Exclude digits")
    rand_group.add_argument("--no-symbols", dest="symbols", action="store_false", default=None,
                            help="Exclude symbols")
    rand_group.add_argument("--exclude-similar", action="store_true", default=None,
                            help="Exclude look-alike characters (i l 1 L o 0 O)")
    rand_group.add_argument("--exclude-ambiguous", action="store_true", default=None,
                            help="Exclude brackets, slashes, quotes and separators")
    rand_group.add_argument("--min-digits", type=int, default=None,
                            help="Minimum number of digits (default: 1)")
    rand_group.add_argument("--min-symbols", type=int, default=None,
                            help="Minimum number of symbols (default: 1)")

    # Passphrase options
    phrase_group = parser.add_argument_group('Passphrases')
    phrase_group.add_argument("-w", "--words", type=int, default=None,
                              help="Words per passphrase (default: 4)")
    phrase_group.add_argument("--separator", default=None,
                              help="Word separator (default: '-')")
    phrase_group.add_argument("--no-capitalize", dest="capitalize", action="store_false",
                              default=None, help="Keep words lowercase")
    phrase_group.add_argument("--capitalize", dest="capitalize", action="store_true", default=None,
                              help="Capitalize each word")
    phrase_group.add_argument("--add-numbers", action="store_true", default=None,
                              help="Append a number in [0, 1000)")
    phrase_group.add_argument("--wordlist", metavar="FILE",
                              help="Wordlist file (one word per line or EFF format)")

    # Other commands
    misc_group = parser.add_argument_group('Other')
    misc_group.add_argument("--analyze", action="store_true",
                            help="Analyze a password read from the prompt")
    misc_group.add_argument("--self-test", action="store_true",
                            help="Run statistical tests on the random source")
    misc_group.add_argument("--config", metavar="FILE",
                            help="Config file (default: ~/.passforge/config.json)")
    misc_group.add_argument("--save-config", action="store_true",
                            help="Save the effective settings as new defaults")

    # Output options
    out_group = parser.add_argument_group('Output')
    out_group.add_argument("-q", "--quiet", action="store_true",
                           help="Quiet mode (secrets only)")
    out_group.add_argument("-v", "--verbose", action="store_true",
                           help="Debug logging")

    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    if args.self_test:
        return _handle_self_test(args)

    if args.analyze:
        return _handle_analyze(args)

    return _handle_generation(args)


def _effective_settings(args, config):
    """Config settings with command-line overrides applied."""
    settings = config.settings()
    changes = {}
    if args.mode is not None:
        changes["mode"] = Mode(args.mode)
    for dest, field_name in _OVERRIDES.items():
        value = getattr(args, dest)
        if value is not None:
            changes[field_name] = value
    return dataclasses.replace(settings, **changes)


def _handle_self_test(args):
    """Handle --self-test command."""
    results = RandomSourceTests.run_all_tests(default_source(), verbose=False)

    if not args.quiet:
        print(f"Self-test of {results['source']}:")
        for test in results['tests']:
            status = "PASS" if test['passed'] else "FAIL"
            print(f"  {status}  {test['name']:<30} p-value: {test['p_value']:.6f}")
    print(f"Result: {results['passed']}/{results['total']} tests passed")

    return 0 if results['passed'] == results['total'] else 1


def _handle_analyze(args):
    """Handle --analyze command."""
    password = getpass.getpass("Password to analyze: ")
    analysis = analyze_password(password)

    print(f"Rating:     {analysis.rating} (score {analysis.score}/6)")
    print(f"Entropy:    ~{analysis.entropy:.1f} bits ({analysis.label})")
    print(f"Crack time: {analysis.crack_time}")
    if not args.quiet:
        for line in analysis.feedback:
            print(f"  - {line}")
        if analysis.suggestions:
            print("Suggestions:")
            for line in analysis.suggestions:
                print(f"  * {line}")
    return 0


def _handle_generation(args):
    """Handle normal password generation."""
    config = Config(args.config)

    # ContractViolation is a ValueError; so are unreadable wordlists
    try:
        settings = _effective_settings(args, config)
        settings.validate()
        if args.wordlist:
            config.set("wordlist", "path", args.wordlist)
        wordlist = config.wordlist() if settings.mode is Mode.PASSPHRASE else None
    except (ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    count = args.count if args.count is not None else config.get("output", "count")
    if isinstance(count, bool) or not isinstance(count, int):
        print(f"Error: output count must be an integer, got {count!r}", file=sys.stderr)
        return 2
    show_report = config.get("output", "show_report") and not args.quiet

    if not args.quiet:
        print("=" * 60)
        print("PASSFORGE - SECURE PASSWORD GENERATOR")
        print("=" * 60)
        if settings.mode is Mode.PASSPHRASE:
            print(f"Passphrases ({settings.word_count} words, {len(wordlist)}-word list):")
        else:
            print(f"Passwords ({settings.length} chars):")
        print("-" * 60)

    report = None
    try:
        for _ in range(max(1, count)):
            secret, report = generate(settings, wordlist)
            if not secret.ok:
                print(f"Error: {secret.error}", file=sys.stderr)
                return 1
            print(secret.secret if args.quiet else f"  {secret.secret}")

    except ContractViolation as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    except RandomSourceError as e:
        print(f"FATAL: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\n\nUser interrupt", file=sys.stderr)
        return 130

    if show_report and report is not None:
        print()
        print(f"Entropy:    ~{report.bits:.1f} bits")
        print(f"Strength:   {report.label}")
        print(f"Crack time: {report.estimated_crack_time} (at 10^12 guesses/s)")
        print("=" * 60)

    if args.save_config:
        config.update_settings(settings)
        config.save()
        if not args.quiet:
            print(f"Settings saved: {config.path}")

    return 0


if __name__ == "__main__":
    sys.exit(main() or 0)
