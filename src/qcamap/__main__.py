"""Entry point: python -m qcamap <coding-url> <command> [args]

- show:                               Summary of categories and documents
- dump:                               Full project graph as JSON
- merge BASE OTHER... [--rename-merged]: Move markers of OTHER categories to BASE
- duplicate BASE NEW:                 Copy markers of BASE into new category NEW
- sort:                               Sort categories alphabetically
"""

from __future__ import annotations

import asyncio
import json
import logging
import sys
from urllib.parse import urlsplit

from qcamap.client import AiohttpTransport
from qcamap.config import QcamapConfig, load_config
from qcamap.core import open_project
from qcamap.dump import format_summary, project_to_dict
from qcamap.errors import QcamapError

logger = logging.getLogger("qcamap")

USAGE = """\
Usage: python -m qcamap <coding-url> <command> [args]
  show                                  Summary of categories and documents
  dump                                  Full project graph as JSON
  merge BASE OTHER... [--rename-merged] Move markers of OTHER categories to BASE
  duplicate BASE NEW                    Copy markers of BASE into new category NEW
  sort                                  Sort categories alphabetically"""


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def _usage() -> None:
    print(USAGE, file=sys.stderr)
    sys.exit(1)


async def _run(config: QcamapConfig, url: str, cmd: str, args: list[str]) -> None:
    host = urlsplit(config.api.base_url).netloc
    async with AiohttpTransport(config.api) as transport:
        project = await open_project(url, transport, host=host)

        if cmd == "show":
            print(format_summary(project))
        elif cmd == "dump":
            print(json.dumps(project_to_dict(project), indent=2, ensure_ascii=False))
        elif cmd == "merge":
            rename = "--rename-merged" in args
            names = [a for a in args if a != "--rename-merged"]
            moved = await project.merge(names[0], *names[1:], rename_merged=rename)
            logger.info("Moved %d markers to %s", moved, names[0])
        elif cmd == "duplicate":
            category = await project.duplicate(args[0], args[1])
            logger.info("Created %s with %d markers", category.name, project.count_markers(category))
        elif cmd == "sort":
            await project.sort_categories()


def _check_args(cmd: str, args: list[str]) -> bool:
    if cmd in ("show", "dump", "sort"):
        return not args
    if cmd == "merge":
        return len([a for a in args if a != "--rename-merged"]) >= 2
    if cmd == "duplicate":
        return len(args) == 2
    return False


def main() -> None:
    if len(sys.argv) < 3:
        _usage()
    url, cmd, args = sys.argv[1], sys.argv[2], sys.argv[3:]
    if not _check_args(cmd, args):
        _usage()

    config = load_config()
    _setup_logging(config.log_level)

    try:
        asyncio.run(_run(config, url, cmd, args))
    except QcamapError as e:
        logger.error("%s failed: %s", cmd, e)
        sys.exit(1)
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()
