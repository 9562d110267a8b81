"""Management command to dump assets to the filesystem."""

from __future__ import annotations

import logging

from django.core.management.base import BaseCommand, CommandError, CommandParser

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = "Dump configured CSS/JS assets to the filesystem."

    def add_arguments(self, parser: CommandParser) -> None:
        parser.add_argument(
            "write_to",
            nargs="?",
            help="Base directory to write to. Defaults to ASSET_DUMPER['WRITE_TO'] or STATIC_ROOT.",
        )
        parser.add_argument(
            "--name",
            nargs="+",
            dest="names",
            help="Specific asset names to dump. If omitted, dumps every configured asset.",
        )
        parser.add_argument(
            "--watch",
            action="store_true",
            help="Check for changes every period and dump the assets that changed.",
        )
        parser.add_argument(
            "--period",
            type=float,
            default=1.0,
            help="Seconds to wait between checks in watch mode.",
        )

    def handle(self, **options: object) -> None:
        from django_asset_dumper.conf import get_setting
        from django_asset_dumper.dumper import AssetDumper
        from django_asset_dumper.exceptions import AssetDumpError
        from django_asset_dumper.manager import get_asset_manager, get_write_to

        write_to = options.get("write_to") or get_write_to()
        manager = get_asset_manager()
        names = options.get("names") or manager.get_names()
        verbosity = options.get("verbosity", 1)

        dumper = AssetDumper(
            manager,
            str(write_to),
            get_setting("VARIABLES"),
            stdout=self.stdout,
            stderr=self.stderr,
            style=self.style,
            verbosity=verbosity,  # type: ignore[arg-type]
        )

        self.stdout.write(f"Dumping assets to {write_to}")

        if options.get("watch"):
            try:
                dumper.watch(names, period=options.get("period", 1.0))  # type: ignore[arg-type]
            except KeyboardInterrupt:
                self.stdout.write("\nStopped watching.")
            return

        try:
            dumper.dump_all(names)  # type: ignore[arg-type]
        except AssetDumpError as e:
            logger.exception("Asset dump failed")
            raise CommandError(str(e)) from e

        self.stdout.write(
            self.style.SUCCESS(f"\nDone. Dumped: {len(names)} asset(s)")  # type: ignore[arg-type]
        )
