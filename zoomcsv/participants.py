"""Reading the participant table of a Zoom meeting export and grouping it by e-mail."""

from __future__ import annotations

import argparse
import io
import string
import sys
from dataclasses import dataclass
from typing import IO, Dict, Iterable, List, Optional, Sequence, TextIO, Tuple

from zoomcsv.bom import skip_bom
from zoomcsv.convert import to_bool, to_int
from zoomcsv.table import CsvTable

NAME_COLUMN = "Name (original name)"
EMAIL_COLUMN = "Email"
JOIN_COLUMN = "Join time"
LEAVE_COLUMN = "Leave time"
DURATION_COLUMN = "Duration (minutes)"
GUEST_COLUMN = "Guest"
WAITING_COLUMN = "In waiting room"

PLAIN_HEADER = (
    "Name,Email,Join time,Leave time,Duration (minutes),Guest,In waiting room"
)
GROUPED_HEADER = (
    "Name (Original Name),Emails (grouped),Join Time,Leave Time,"
    "Duration (Minutes),Guest,In Waiting Room"
)
DEFAULT_OUTPUT = "participants_grouped.csv"

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_TRAILING_BLANKS = "\r \t"
_ENCODING = "utf-8"
_ERRORS = "surrogateescape"


@dataclass
class Participant:
    """One row of the participant table."""

    name: str
    email: str
    join_time: str
    leave_time: str
    duration: int = 0
    guest: bool = False
    in_waiting_room: bool = False


def icontains(haystack: str, needle: str) -> bool:
    """Whether ``needle`` occurs in ``haystack``, ignoring ASCII letter case."""
    return needle.translate(_ASCII_LOWER) in haystack.translate(_ASCII_LOWER)


def _is_participant_header(line: str) -> bool:
    return icontains(line, "name (original name") and icontains(line, "email")


def extract_section(lines: Iterable[str], trim: bool = True) -> str:
    """Return the participant table, from its header line to the end.

    Each line is ended with a newline; with ``trim`` trailing carriage
    returns, spaces and tabs are removed first. Raises ValueError when
    no participant header line is found.
    """
    section: List[str] = []
    found = False
    for line in lines:
        if trim:
            line = line.rstrip(_TRAILING_BLANKS)
        if not found:
            if not _is_participant_header(line):
                continue
            found = True
        section.append(line + "\n")
    if not found:
        raise ValueError("Participants header not found")
    return "".join(section)


def _split_lines(text: str) -> List[str]:
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def _int_or_zero(text: str) -> int:
    try:
        return to_int(text)
    except ValueError:
        return 0


def _bool_or_false(text: str) -> bool:
    try:
        return to_bool(text)
    except ValueError:
        return False


def load_participants(stream: IO, trim: bool = True) -> List[Participant]:
    """Read an export from ``stream`` and return its participants in file order.

    A leading byte-order mark is skipped. Durations that are not whole
    numbers count as 0 and unreadable flags as false. Raises ValueError
    when the participant table is missing and KeyError when it lacks one
    of the expected columns.
    """
    skip_bom(stream)
    data = stream.read()
    if isinstance(data, bytes):
        data = data.decode(_ENCODING, _ERRORS)

    section = extract_section(_split_lines(data), trim)
    table = CsvTable(io.StringIO(section))

    return [
        Participant(
            name=table.cell(NAME_COLUMN, row),
            email=table.cell(EMAIL_COLUMN, row),
            join_time=table.cell(JOIN_COLUMN, row),
            leave_time=table.cell(LEAVE_COLUMN, row),
            duration=_int_or_zero(table.cell(DURATION_COLUMN, row)),
            guest=_bool_or_false(table.cell(GUEST_COLUMN, row)),
            in_waiting_room=_bool_or_false(table.cell(WAITING_COLUMN, row)),
        )
        for row in range(table.row_count())
    ]


def group_by_email(
    participants: Sequence[Participant],
) -> List[Tuple[Participant, str]]:
    """Order participants by e-mail and attach every e-mail used under their name.

    Rows come out in ascending e-mail order, rows sharing an e-mail in
    file order. Each row is paired with the distinct e-mails seen for its
    name, joined by ``"; "``.
    """
    by_email: Dict[str, List[Participant]] = {}
    for participant in participants:
        by_email.setdefault(participant.email, []).append(participant)

    emails_by_name: Dict[str, Dict[str, None]] = {}
    for email, rows in by_email.items():
        for participant in rows:
            emails_by_name.setdefault(participant.name, {})[email] = None

    joined = {name: "; ".join(emails) for name, emails in emails_by_name.items()}

    return [
        (participant, joined[participant.name])
        for email in sorted(by_email)
        for participant in by_email[email]
    ]


def _yes_no(flag: bool) -> str:
    return "Yes" if flag else "No"


def format_row(participant: Participant, emails: Optional[str] = None) -> str:
    """Render one output line without its line ending.

    ``emails`` replaces the participant's own e-mail when given.
    """
    return ",".join(
        (
            participant.name,
            participant.email if emails is None else emails,
            participant.join_time,
            participant.leave_time,
            str(participant.duration),
            _yes_no(participant.guest),
            _yes_no(participant.in_waiting_room),
        )
    )


def write_grouped(
    groups: Iterable[Tuple[Participant, str]], stream: TextIO, eol: str = "\r\n"
) -> None:
    """Write the grouped table, header first, each line ended by ``eol``."""
    stream.write(GROUPED_HEADER + eol)
    for participant, emails in groups:
        stream.write(format_row(participant, emails) + eol)


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="zoomcsv",
        description="Group the participants of a Zoom meeting export by e-mail.",
    )
    parser.add_argument("input", help="participant CSV file downloaded from Zoom")
    parser.add_argument(
        "-o",
        "--output",
        default=DEFAULT_OUTPUT,
        help=f"grouped CSV to create (default: {DEFAULT_OUTPUT})",
    )
    parser.add_argument(
        "--ungrouped",
        action="store_true",
        help="print the participants as read, without grouping or writing a file",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command line tool; returns the process exit status."""
    args = _parse_args(argv)

    try:
        source = open(args.input, "rb")
    except OSError:
        print(f"Cannot open '{args.input}'", file=sys.stderr)
        return 1

    with source:
        try:
            participants = load_participants(source, trim=not args.ungrouped)
        except (ValueError, KeyError) as exc:
            print(exc.args[0] if exc.args else exc, file=sys.stderr)
            return 2

    if args.ungrouped:
        print(PLAIN_HEADER)
        for participant in participants:
            print(format_row(participant))
        return 0

    groups = group_by_email(participants)
    try:
        target = open(args.output, "w", encoding=_ENCODING, errors=_ERRORS, newline="")
    except OSError:
        print(f"Cannot create {args.output}", file=sys.stderr)
        return 3

    with target:
        write_grouped(groups, sys.stdout, "\n")
        write_grouped(groups, target, "\r\n")

    print(f"\nCreated {args.output}")
    return 0