"""
Check command: list the accessor methods of Java sources.
"""

import argparse
import json
from typing import List

from ..report import FileReport
from .base import BaseCommand


class CheckCommand(BaseCommand):
    """Scan Java files and report getters and setters."""

    @classmethod
    def help(cls) -> str:
        """Return help text for the check command."""
        return "Find getter and setter methods in Java sources"

    @classmethod
    def add_arguments(cls, parser: argparse.ArgumentParser):
        """Add command-specific arguments."""
        parser.add_argument(
            "code",
            nargs="?",
            default=".",
            help="Directory or Java file to analyze (default: current directory)"
        )
        parser.add_argument(
            "--format",
            choices=["text", "json"],
            default="text",
            help="Output format (default: text)"
        )

    def execute(self) -> int:
        """Execute the check command."""
        files = self.scan_service.find_files(self.args.code)
        if not files:
            print(f"❌ No Java files found in {self.args.code}")
            return 1

        if self.args.format == "text":
            print(f"🔍 Analyzing {len(files)} Java files...")

        reports = [self.scan_service.scan_file(path) for path in files]

        if self.args.format == "json":
            self._display_json(reports)
        else:
            self._display_text(reports)

        return 0

    def _display_json(self, reports: List[FileReport]):
        output = {
            'files': [report.to_dict() for report in reports],
            'summary': self._summary(reports),
        }
        print(json.dumps(output, indent=2))

    def _display_text(self, reports: List[FileReport]):
        for report in reports:
            if report.error:
                print(f"⚠️  {report.path}: {report.error}")
                continue
            if not report.records:
                continue

            print(f"\n📄 {report.path}")
            for record in report.records:
                location = f", line {record.line}" if record.line else ""
                print(f"   {record.class_name}.{record.method_name} ({record.kind}{location})")

        summary = self._summary(reports)
        print(f"\n📊 Summary: {summary['accessors']} accessors "
              f"({summary['getters']} getters, {summary['setters']} setters) "
              f"in {summary['methods']} methods across {summary['files']} files")
        if summary['failed']:
            print(f"   {summary['failed']} files could not be analyzed")

    def _summary(self, reports: List[FileReport]) -> dict:
        records = [r for report in reports for r in report.records]
        return {
            'files': len(reports),
            'failed': sum(1 for report in reports if report.error),
            'methods': sum(report.method_count for report in reports),
            'accessors': len(records),
            'getters': sum(1 for r in records if r.kind == 'getter'),
            'setters': sum(1 for r in records if r.kind == 'setter'),
        }
