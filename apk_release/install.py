from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Dict, List, Optional

from .config import load_release_config
from .installer import UpdateInstaller
from .lib.adb import AdbHost
from .lib.file_provider import FileProvider
from .logging_utils import configure_logging

logger = logging.getLogger(__name__)


def _parse_roots(items: List[str]) -> Dict[str, str]:
    roots: Dict[str, str] = {}
    for item in items:
        name, sep, directory = item.partition("=")
        if not sep or not name or not directory:
            raise ValueError(f"--shared-root expects NAME=DIR, got {item!r}")
        roots[name] = directory
    return roots


def main(argv: Optional[list[str]] = None) -> int:
    p = argparse.ArgumentParser(prog="apk-release-install")
    p.add_argument("path", help="Device path of the downloaded package")
    p.add_argument("--package", default=None, help="Application id of the installed app")
    p.add_argument("--config", default=None, help="Path to apk_release.yaml")
    p.add_argument("--shared-root", action="append", default=[], help="Shared root NAME=DIR (repeatable)")
    p.add_argument("--serial", default=None, help="adb device serial")
    p.add_argument("--adb", default="adb", help="adb executable")
    p.add_argument("--sdk", type=int, default=None, help="Override the device SDK level")
    p.add_argument(
        "--no-run-as",
        action="store_true",
        help="Run device commands as the adb shell user (world-readable files, legacy devices)",
    )
    p.add_argument("--log", default=None, help="Also write the installer log to this file")
    p.add_argument("--dry-run", action="store_true")

    args = p.parse_args(argv)
    if args.dry_run and args.sdk is None:
        p.error("--dry-run requires --sdk")

    configure_logging(log_path=args.log)

    cfg = load_release_config(args.config)
    package_name = args.package or cfg.package_name
    if not package_name:
        p.error("--package is required (or installer.package_name in the config)")

    try:
        roots = {**cfg.shared_roots, **_parse_roots(args.shared_root)}
    except ValueError as e:
        p.error(str(e))

    authority = f"{package_name}{cfg.authority_suffix}"
    providers = {authority: FileProvider(authority=authority, roots=roots)} if roots else {}

    host = AdbHost(
        package_name=package_name,
        providers=providers,
        serial=args.serial,
        adb=args.adb,
        dry_run=bool(args.dry_run),
        sdk_override=args.sdk,
        run_as=not args.no_run_as,
    )
    result = UpdateInstaller.from_config(host, cfg).install_apk(args.path)

    sys.stdout.write(json.dumps(result.to_dict(), indent=2, sort_keys=True) + "\n")
    return 0 if result.ok else 1


if __name__ == "__main__":
    raise SystemExit(main())
