"""Command line entry point."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, Dict, List, Optional

from .errors import ManifestError, UnknownTransportError
from .manifest import load_manifest
from .registry import TransportRegistry
from .status import reason_phrase
from .stub import StubBuilder
from . import transport

logger = logging.getLogger(__name__)

# name -> constructor picked from a registry
TRANSPORTS: Dict[str, Callable[[TransportRegistry], type]] = {
    'requests': lambda registry: registry.original,
    'mock': lambda registry: registry.mock_class,
}


def resolve_transport(name: str, registry: TransportRegistry) -> type:
    """Map a transport name to a constructor, failing on unknown names."""
    try:
        pick = TRANSPORTS[name]
    except KeyError:
        raise UnknownTransportError(f"Unknown transport: {name!r} (expected one of {', '.join(TRANSPORTS)})") from None
    return pick(registry)


def cmd_reason(args: argparse.Namespace) -> int:
    print(reason_phrase(args.code))
    return 0


def cmd_validate(args: argparse.Namespace) -> int:
    failed = 0
    for path in args.manifests:
        try:
            load_manifest(path)
        except ManifestError as exc:
            print(f"FAIL {exc}")
            failed += 1
        else:
            print(f"OK   {path}")
    return 1 if failed else 0


def cmd_request(args: argparse.Namespace) -> int:
    registry = TransportRegistry(transport)
    try:
        constructor = resolve_transport(args.transport, registry)
        if args.transport == 'mock' and args.manifest:
            StubBuilder(registry).and_return_manifest(args.manifest)
        request = constructor(timeout=args.timeout)
        request.open(args.method, args.url, False)
        for header in args.header:
            name, sep, value = header.partition(':')
            if not sep:
                logger.error("Malformed header %r, expected NAME:VALUE", header)
                return 2
            request.setRequestHeader(name.strip(), value.strip())
        request.send(args.data)
    except (ManifestError, UnknownTransportError) as exc:
        logger.error("%s", exc)
        return 1

    print(f"{request.status} {request.statusText}".rstrip())
    sys.stdout.write(request.getAllResponseHeaders().replace('\r\n', '\n'))
    if request.responseText is not None:
        print()
        print(request.responseText)
    return 0 if request.status else 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='xhrmock')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    subparsers = parser.add_subparsers(dest='command', required=True)

    reason = subparsers.add_parser('reason', help='Print the reason phrase for a status code')
    reason.add_argument('code', type=int)
    reason.set_defaults(func=cmd_reason)

    validate = subparsers.add_parser('validate', help='Validate stub manifest files')
    validate.add_argument('manifests', nargs='+', metavar='MANIFEST')
    validate.set_defaults(func=cmd_validate)

    request = subparsers.add_parser('request', help='Send one request through a transport')
    request.add_argument('method')
    request.add_argument('url')
    request.add_argument('--transport', choices=sorted(TRANSPORTS), default='mock',
                         help='Transport to send through (defaults to mock)')
    request.add_argument('--manifest', help='Stub manifest answering mock requests')
    request.add_argument('--data', help='Request body')
    request.add_argument('--header', action='append', default=[], metavar='NAME:VALUE',
                         help='Request header, may be repeated')
    request.add_argument('--timeout', type=int, default=15, help='Timeout in seconds for real requests')
    request.set_defaults(func=cmd_request)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the ``xhrmock`` command."""
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format='%(asctime)s [%(levelname)s] %(message)s')
    return args.func(args)
