#!/usr/bin/env python3
"""
Local HTTP server exposing the passforge generator as a JSON API.

Usage:
    passforge-server [--port 8742] [--wordlist FILE]

Endpoints:
    GET /api/status    - server state
    GET /api/words     - passphrase wordlist (JSON array)
    GET /api/generate  - generate secrets; query params mirror PasswordSettings
"""

import argparse
import http.server
import json
import logging
import socketserver
import sys
from typing import Any, Dict, List, Sequence, Tuple
from urllib.parse import parse_qs, urlparse

from passforge import __version__
from passforge.config import Config
from passforge.core.generator import generate
from passforge.core.log import get_logger, setup_logging
from passforge.core.random_source import ContractViolation, default_source
from passforge.core.settings import Mode, PasswordSettings

logger = get_logger('server')

PORT = 8742
HOST = "127.0.0.1"

MAX_COUNT = 10
MAX_LENGTH = 256
MAX_WORDS = 32

_TRUE = ('1', 'true', 'yes', 'on')
_FALSE = ('0', 'false', 'no', 'off')

_BOOL_PARAMS = {
    'upper': 'include_uppercase',
    'lower': 'include_lowercase',
    'digits': 'include_numbers',
    'symbols': 'include_symbols',
    'exclude_similar': 'exclude_similar',
    'exclude_ambiguous': 'exclude_ambiguous',
    'capitalize': 'capitalize_words',
    'add_numbers': 'add_numbers',
}

# name -> (field, max)
_INT_PARAMS = {
    'length': ('length', MAX_LENGTH),
    'min_digits': ('min_digits', MAX_LENGTH),
    'min_symbols': ('min_symbols', MAX_LENGTH),
    'words': ('word_count', MAX_WORDS),
}


def _first(params: Dict[str, List[str]], name: str):
    values = params.get(name)
    return values[0] if values else None


def settings_from_params(params: Dict[str, List[str]]) -> PasswordSettings:
    """
    Build PasswordSettings from parsed query parameters.

    Raises:
        ContractViolation: On malformed or out-of-range values
    """
    data: Dict[str, Any] = {}

    mode = _first(params, 'mode')
    if mode is not None:
        data['mode'] = mode

    for name, field_name in _BOOL_PARAMS.items():
        raw = _first(params, name)
        if raw is None:
            continue
        if raw.lower() in _TRUE:
            data[field_name] = True
        elif raw.lower() in _FALSE:
            data[field_name] = False
        else:
            raise ContractViolation(f"{name} must be a boolean, got {raw!r}")

    for name, (field_name, maximum) in _INT_PARAMS.items():
        raw = _first(params, name)
        if raw is None:
            continue
        try:
            value = int(raw)
        except ValueError:
            raise ContractViolation(f"{name} must be an integer, got {raw!r}") from None
        if value > maximum:
            raise ContractViolation(f"{name} must be <= {maximum}, got {value}")
        data[field_name] = value

    separator = _first(params, 'separator')
    if separator is not None:
        data['separator'] = separator

    settings = PasswordSettings.from_dict(data)
    settings.validate()
    return settings


def handle_api(path: str, params: Dict[str, List[str]],
               wordlist: Sequence[str]) -> Tuple[int, Any]:
    """Route one GET request. Returns (status, JSON-serializable body)."""
    if path == '/api/status':
        return 200, {
            'server': 'passforge',
            'version': __version__,
            'entropy_source': default_source().name,
            'wordlist_size': len(wordlist),
        }

    if path == '/api/words':
        return 200, list(wordlist)

    if path == '/api/generate':
        try:
            settings = settings_from_params(params)
            count = int(_first(params, 'count') or 1)
        except (ContractViolation, ValueError) as e:
            return 400, {'success': False, 'error': str(e)}
        count = max(1, min(MAX_COUNT, count))

        words = wordlist if settings.mode is Mode.PASSPHRASE else None
        secrets = []
        report = None
        for _ in range(count):
            secret, report = generate(settings, words)
            if not secret.ok:
                return 200, {'success': False, 'error': secret.error}
            secrets.append(secret.secret)

        return 200, {
            'success': True,
            'secrets': secrets,
            'settings': settings.to_dict(),
            'report': report.to_dict(),
            'entropy_source': secret.source,
        }

    return 404, {'error': 'Not found'}


class PassforgeHandler(http.server.BaseHTTPRequestHandler):
    """HTTP handler for the generator API."""

    wordlist: Sequence[str] = ()

    def send_json(self, data, status=200):
        body = json.dumps(data).encode()
        self.send_response(status)
        self.send_header('Content-Type', 'application/json')
        self.send_header('Content-Length', str(len(body)))
        self.send_header('Cache-Control', 'no-store')
        self.end_headers()
        self.wfile.write(body)

    def do_GET(self):
        parsed = urlparse(self.path)
        params = parse_qs(parsed.query, keep_blank_values=True)
        status, body = handle_api(parsed.path, params, self.wordlist)
        self.send_json(body, status)

    def log_message(self, format, *args):
        # Request line only
        logger.info("%s %s", self.address_string(), args[0] if args else format)


def make_server(host: str = HOST, port: int = PORT,
                wordlist: Sequence[str] = ()) -> socketserver.TCPServer:
    handler = type('BoundPassforgeHandler', (PassforgeHandler,), {'wordlist': tuple(wordlist)})
    socketserver.ThreadingTCPServer.allow_reuse_address = True
    return socketserver.ThreadingTCPServer((host, port), handler)


def main(argv=None):
    parser = argparse.ArgumentParser(description="passforge local JSON API")
    parser.add_argument("--host", default=HOST, help=f"Bind address (default: {HOST})")
    parser.add_argument("--port", type=int, default=PORT, help=f"Port (default: {PORT})")
    parser.add_argument("--wordlist", metavar="FILE", help="Passphrase wordlist file")
    parser.add_argument("--config", metavar="FILE", help="Config file")
    args = parser.parse_args(argv)

    setup_logging(logging.INFO)

    config = Config(args.config)
    if args.wordlist:
        config.set("wordlist", "path", args.wordlist)
    try:
        wordlist = config.wordlist()
    except (ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    print("=" * 60)
    print(f"passforge server v{__version__}")
    print("=" * 60)
    print(f"\nServer: http://{args.host}:{args.port}")
    print(f"Wordlist: {len(wordlist)} words")
    print("\nEndpoints:")
    print("  GET /api/status   - Server state")
    print("  GET /api/words    - Passphrase wordlist")
    print("  GET /api/generate - Generate passwords or passphrases")
    print("\nCtrl+C to stop\n")

    with make_server(args.host, args.port, wordlist) as httpd:
        try:
            httpd.serve_forever()
        except KeyboardInterrupt:
            print("\nStopping server...")
    return 0


if __name__ == "__main__":
    sys.exit(main() or 0)
