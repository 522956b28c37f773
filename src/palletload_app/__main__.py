import argparse
import logging
import sys
from importlib import metadata
from typing import List, Optional

from palletload_core.engine import PalletPacker
from palletload_core.errors import PackingError
from palletload_core.settings import load_settings

from palletload_app.data import load_catalog
from palletload_app.manifest import build_manifest, parse_request
from palletload_app.plan_io import save_plan
from palletload_app.report import format_report

logger = logging.getLogger(__name__)


def _get_app_version() -> str:
    for distribution in ("palletload", "palletload_app"):
        try:
            return metadata.version(distribution)
        except metadata.PackageNotFoundError:
            continue
    return "dev"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="palletload",
        description="Plan how a list of articles is stacked onto pallets.",
    )
    parser.add_argument(
        "articles",
        nargs="*",
        metavar="ARTICLE:QTY",
        help="article number with quantity, e.g. K-4030:12",
    )
    parser.add_argument("--catalog", help="catalog CSV (default: bundled catalog)")
    parser.add_argument("--base", help="article number of the pallet base")
    parser.add_argument("--json", dest="json_path", help="write the plan as JSON")
    parser.add_argument("--image", dest="image_path", help="write a PNG drawing of the plan")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_get_app_version()}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    settings = load_settings()

    try:
        catalog = load_catalog(args.catalog)
        base = catalog.get(args.base or settings.pallet_base_id)
        requests = [parse_request(text) for text in args.articles]
        manifest = build_manifest(catalog, requests)
        plan = PalletPacker(settings.limits, gap_factor=settings.gap_factor).pack(
            manifest, base
        )
    except (PackingError, ValueError, FileNotFoundError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(format_report(plan, base))
    if args.json_path:
        save_plan(args.json_path, plan, base)
        logger.info("Plan written to %s", args.json_path)
    if args.image_path:
        from palletload_app.render import save_plan_image

        save_plan_image(args.image_path, plan, base)
        logger.info("Drawing written to %s", args.image_path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
