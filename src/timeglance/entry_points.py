import argparse
import sys
from datetime import datetime

from textual.app import App

from timeglance.instant import from_epoch_millis
from timeglance.presenter import TimestampPresenter, default_presenter
from timeglance.screens.timeline import TimelineScreen
from timeglance.utils.error_handling import log_validation_error
from timeglance.utils.logger import log
from timeglance.utils.validation import ValidationError, validate_epoch_millis_list

FORMATS = ("describe", "clock", "clock-seconds", "short", "month-day")


class TimelineApp(App):
    DEFAULT_CSS = """
    Screen {
        background: $surface-darken-3;
        width: 100%;
        height: 100%;
    }
    """

    def __init__(self, instants, ascending: bool = True, presenter: TimestampPresenter | None = None):
        """Initialize the live timeline application.

        Args:
            instants: The instants to show, in any order
            ascending: Initial sort order, oldest first when True
            presenter: Presenter to resolve labels with, the default one if omitted
        """
        super().__init__()
        self.instants = list(instants)
        self.ascending = ascending
        self.presenter = presenter
        self._console_was_enabled = True

    def on_mount(self):
        # The TUI owns the terminal until it exits
        self._console_was_enabled = log.set_console(False)
        self.push_screen(TimelineScreen(self.instants, self.ascending, self.presenter))

    def on_unmount(self):
        log.set_console(self._console_was_enabled)


def _create_argument_parser():
    """Create and configure the command-line argument parser."""
    parser = argparse.ArgumentParser(
        prog="timeglance",
        description="timeglance: human-friendly labels for epoch-millisecond timestamps",
    )
    parser.add_argument(
        'millis',
        nargs='*',
        metavar='MILLIS',
        help='Milliseconds since 1970-01-01T00:00:00Z (default: now)',
    )
    parser.add_argument('--format', choices=FORMATS, default='describe', help='Output format (default: describe)')
    parser.add_argument('--zero-pad', action='store_true', help='Zero-pad day and month in the short format')
    parser.add_argument('--abbreviate', action='store_true', help='Use three-letter month names in month-day format')
    parser.add_argument('--sort', choices=('asc', 'desc'), help='Sort output, oldest (asc) or newest (desc) first')
    parser.add_argument('--watch', action='store_true', help='Open a live timeline instead of printing')
    return parser


def _resolve_instants(args, presenter: TimestampPresenter) -> list[datetime]:
    """Turn validated arguments into instants, defaulting to the current one."""
    try:
        millis = validate_epoch_millis_list(args.millis)
    except ValidationError as e:
        log_validation_error("MILLIS", " ".join(args.millis), e)
        sys.stderr.write(f"Input Error: {e}\n")
        sys.stderr.write("Use --help for usage information.\n")
        sys.exit(1)

    if not millis:
        return [presenter.now()]
    return [from_epoch_millis(value) for value in millis]


def format_instant(instant: datetime, args, presenter: TimestampPresenter, now: datetime | None = None) -> str:
    """Render one instant in the format selected on the command line."""
    if args.format == 'clock':
        return presenter.format_clock_hhmm(instant)
    if args.format == 'clock-seconds':
        return presenter.format_clock_hhmmss(instant)
    if args.format == 'short':
        return presenter.format_short_date(instant, zero_pad=args.zero_pad)
    if args.format == 'month-day':
        return presenter.format_month_day(instant, abbreviate=args.abbreviate)
    return presenter.describe(instant, now=now)


def main(argv=None, presenter: TimestampPresenter | None = None):
    """Main entry point for the timeglance command."""
    presenter = presenter or default_presenter
    parser = _create_argument_parser()
    args = parser.parse_args(argv)

    instants = _resolve_instants(args, presenter)
    ascending = args.sort != 'desc'

    if args.watch:
        log.info(f"[CLI] Opening timeline for {len(instants)} timestamps")
        TimelineApp(instants, ascending, presenter).run()
        return 0

    if args.sort:
        presenter.sort_instants(instants, ascending)

    now = presenter.now()
    for instant in instants:
        sys.stdout.write(format_instant(instant, args, presenter, now) + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
