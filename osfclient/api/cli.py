"""
Terminal adapter for issuing a single OSF web service query.

Architectural role:
- Builds an `OsfContext` from the environment (`.env` supported).
- Parses `key=value` parameters for one service path.
- Delegates the request lifecycle to `osfclient.core.query.osf_query`.

Request lifecycle:
1. Parse arguments.
2. Resolve context via `context_from_env` (fails fast on missing settings).
3. Run the query.
4. Print the decoded value as JSON on success, or status and body on stderr.

Exit codes:
- 0: 2xx response.
- 1: non-2xx response.
- 2: invalid arguments or configuration.
"""

from dotenv import load_dotenv

load_dotenv()

import argparse
import json
import logging
import sys

from osfclient.config.endpoint_config import context_from_env
from osfclient.core import context
from osfclient.core.query import osf_query


def parse_param(raw: str) -> tuple[str, str]:
    """Split a `key=value` argument; the value may itself contain `=`."""
    key, sep, value = raw.partition("=")
    if not sep or not key:
        raise argparse.ArgumentTypeError(f"expected key=value, got {raw!r}")
    return key, value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="osf-query",
        description="Send one signed query to an OSF web service endpoint.",
    )
    parser.add_argument("path", help="service path, e.g. /ws/crud/read/")
    parser.add_argument("params", nargs="*", type=parse_param, help="key=value parameters")
    parser.add_argument("--method", choices=context.METHODS, default=context.GET)
    parser.add_argument("--mime", default="application/json")
    parser.add_argument("--debug", action="store_true")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable INFO logging")
    return parser


def render(value) -> str:
    if isinstance(value, str):
        return value
    return json.dumps(value, indent=2, ensure_ascii=False, default=str)


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        ctx = context_from_env()
    except RuntimeError as err:
        print(f"configuration error: {err}", file=sys.stderr)
        return 2

    options = context.merge_options(
        dict(args.params),
        {context.METHOD_KEY: args.method},
        context.mime(args.mime),
        context.debug() if args.debug else {},
    )
    result = osf_query(ctx, args.path, options)

    if not result.ok:
        print(f"HTTP {result.status_code}", file=sys.stderr)
        print(result.body, file=sys.stderr)
        return 1

    print(render(result.value))
    return 0


if __name__ == "__main__":
    sys.exit(main())
