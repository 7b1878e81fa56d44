"""CLI entry point: load users and report validation issues and statistics.

Usage:
    python -m scripts.roster_report [--source data/users.csv] [--email a@b.com --password secret]

ROSTER_SOURCE and ROSTER_LOG_LEVEL environment variables provide defaults. Without
--source or ROSTER_SOURCE, the data/users.csv shipped with the repo is used.
"""

import argparse
import json
import logging
import os
from pathlib import Path

from roster import UserStore, create_source

logger = logging.getLogger(__name__)

DEFAULT_SOURCE = str(Path(__file__).resolve().parent.parent / "data" / "users.csv")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Load user records and report on them")
    parser.add_argument(
        "--source",
        default=os.environ.get("ROSTER_SOURCE", DEFAULT_SOURCE),
        help="File path or http(s) URL of the users CSV",
    )
    parser.add_argument("--email", help="Email to authenticate (requires --password)")
    parser.add_argument("--password", help="Password to authenticate")
    parser.add_argument(
        "--log-level", default=os.environ.get("ROSTER_LOG_LEVEL", "INFO"), help="Logging level"
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    store = UserStore(create_source(args.source))
    store.load(args.source)
    if store.is_fallback:
        logger.warning("Reporting on fallback demo users, not %s", args.source)

    report = store.validate()
    for issue in report["issues"]:
        logger.warning(issue)
    logger.info(
        "Validation: %s (%d users, %d active)",
        "ok" if report["valid"] else f"{len(report['issues'])} issues",
        report["total"],
        report["active_count"],
    )
    print(json.dumps(store.statistics(), indent=2, ensure_ascii=False))

    if args.email:
        user = store.authenticate(args.email, args.password or "")
        if user is None:
            logger.error("Authentication failed for %s", args.email)
            raise SystemExit(1)
        logger.info(
            "Authenticated %s %s (%s)",
            user.get("firstName"),
            user.get("lastName"),
            user.get("role"),
        )


if __name__ == "__main__":
    main()
