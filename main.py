import argparse
import logging

from result_checker import config
from result_checker.batch import fetch_batch
from result_checker.filters import filter_by_min_marks
from result_checker.models import ResultStatus
from result_checker.report import write_csv
from result_checker.resolvers import RESOLVERS, get_resolver


def read_roll_numbers(args):
    rolls = list(args.rolls)
    if args.file:
        with open(args.file, encoding='utf-8') as f:
            rolls.extend(line.strip() for line in f)
    return [roll for roll in rolls if roll]


def build_parser():
    parser = argparse.ArgumentParser(description=f"Fetch {config.SUBJECT.title()} marks for a list of roll numbers")
    parser.add_argument("rolls", nargs="*", help="Roll numbers to fetch")
    parser.add_argument("--file", help="Text file with one roll number per line")
    parser.add_argument("--output", default="Class_Results.csv", help="CSV file to write")
    parser.add_argument("--min-marks", type=int, help="Only write students with at least these marks")
    parser.add_argument("--resolver", choices=sorted(RESOLVERS), default=config.RESOLVER,
                        help="Where results come from")
    parser.add_argument("--max-workers", type=int, help="Limit concurrent requests")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s - %(levelname)s - %(message)s"
    )

    roll_numbers = read_roll_numbers(args)
    if not roll_numbers:
        print("No roll numbers given. Pass them as arguments or with --file.")
        return 1

    print(f"Fetching {len(roll_numbers)} roll numbers...")
    records = fetch_batch(roll_numbers, get_resolver(args.resolver), max_workers=args.max_workers)
    if args.min_marks is not None:
        records = filter_by_min_marks(records, args.min_marks)

    with open(args.output, mode='w', newline='', encoding='utf-8') as file:
        write_csv(records, file)

    counts = {status: 0 for status in ResultStatus}
    for record in records:
        counts[record.status] += 1
    summary = ", ".join(f"{status.value}: {count}" for status, count in counts.items())
    print(f"\nDone! {summary}. You can now open '{args.output}' in Excel.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
