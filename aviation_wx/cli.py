#!/usr/bin/env python3

import os
import sys
import json
import argparse
import logging
from typing import List, Optional

from tabulate import tabulate

from aviation_wx.weather import (
    WeatherParser,
    WeatherAnalyzer,
    TafSegmenter,
    UnitMode,
    display_list,
    taf_summary,
    level_emoji,
)

logger = logging.getLogger(__name__)

UNITS_ENV_VAR = 'AVIATION_WX_UNITS'


class Command:
    """Command-line interface for aviation_wx."""

    def __init__(self, args, out=None):
        """
        Initialize the command interface.

        Args:
            args: Parsed command line arguments
            out: Stream to write to (defaults to stdout)
        """
        self.args = args
        self.out = out or sys.stdout

    def _print(self, text: str = '') -> None:
        print(text, file=self.out)

    def run_metar(self):
        """Decode a METAR and print display rows, category and alerts."""
        report = WeatherParser.parse_metar(self.args.text)
        category = WeatherAnalyzer.report_category(report)
        alerts = WeatherAnalyzer.alerts(report)
        rows = display_list(report, self.args.units)
        logger.debug("Decoded %s: %s, %d alerts", report.station, category.value, len(alerts))

        if self.args.format == 'json':
            self._print(json.dumps({
                'report': report.to_dict(),
                'flight_category': category.value,
                'alerts': [alert.to_dict() for alert in alerts],
                'display': [{'label': label, 'value': value} for label, value in rows],
            }, indent=2, ensure_ascii=False))
            return

        self._print(tabulate(rows, tablefmt='grid'))
        self._print(f"Flight category: {category.value}")
        for alert in alerts:
            self._print(f"{level_emoji(alert.level)} {alert.text}")

    def run_taf(self):
        """Split a TAF into change groups and print them."""
        segments = TafSegmenter.segment(self.args.text)

        if self.args.format == 'json':
            self._print(json.dumps({
                'summary': [{'label': label, 'value': value} for label, value in taf_summary(self.args.text)],
                'segments': [segment.to_dict() for segment in segments],
            }, indent=2, ensure_ascii=False))
            return

        summary = taf_summary(self.args.text)
        if summary:
            self._print(tabulate(summary, tablefmt='grid'))
        self._print(tabulate(
            [(segment.tag, segment.time, segment.body) for segment in segments],
            headers=['Group', 'Time', 'Conditions'],
            tablefmt='grid',
        ))

    def run(self):
        """Run the specified command."""
        getattr(self, f'run_{self.args.command}')()


def build_parser() -> argparse.ArgumentParser:
    default_units = os.environ.get(UNITS_ENV_VAR, UnitMode.METRIC.value)
    if default_units not in [mode.value for mode in UnitMode]:
        logger.warning("Ignoring %s=%s, using metric", UNITS_ENV_VAR, default_units)
        default_units = UnitMode.METRIC.value

    parser = argparse.ArgumentParser(description='Decode METAR and TAF reports')
    parser.add_argument('command', help='Command to execute', choices=['metar', 'taf'])
    parser.add_argument('text', help='Raw report text (read from stdin if omitted)', nargs='*')
    parser.add_argument('-u', '--units', help=f'Display units (default from {UNITS_ENV_VAR})',
                        choices=[mode.value for mode in UnitMode], default=default_units)
    parser.add_argument('--format', help='Output format (json,human)', choices=['json', 'human'], default='human')
    parser.add_argument('-v', '--verbose', help='Verbose output', action='store_true')
    return parser


def main(argv: Optional[List[str]] = None, stdin=None, out=None) -> int:
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    parser = build_parser()
    args = parser.parse_intermixed_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    text = ' '.join(args.text)
    if not text:
        text = (stdin or sys.stdin).read()
    if not text.strip():
        parser.error('no report text given')
    args.text = text

    cmd = Command(args, out=out)
    cmd.run()
    return 0


if __name__ == '__main__':
    sys.exit(main())
