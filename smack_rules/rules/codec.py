"""
Smack rule file codec
Reading rule files into a RuleStore and writing a RuleStore back out
"""

import os
from typing import List, Optional, Tuple, Union
import structlog

from ..access.mask import AccessMask, RuleLayout, parse_access, format_access
from ..config import get_rules_config
from ..constants import RuleFileFormat
from ..exceptions import RuleFileError, RuleFormatError, RuleStoreClosedError, SmackRulesError
from .store import RuleStore

logger = structlog.get_logger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


def _split_tokens(line: str) -> List[str]:
    """Split on runs of spaces and the line terminator; tabs are not separators"""
    line = line.replace(RuleFileFormat.LINE_TERMINATOR, RuleFileFormat.FIELD_SEPARATOR)
    return [token for token in line.split(RuleFileFormat.FIELD_SEPARATOR) if token]


def parse_rule_line(line: str, line_number: int = 0,
                    path: Optional[str] = None) -> Tuple[str, str, str]:
    """
    Parse one rule file line into (subject, object, access_spec).

    Raises:
        RuleFormatError: If the line does not hold exactly three tokens
    """
    tokens = _split_tokens(line)
    if len(tokens) != RuleFileFormat.TOKENS_PER_LINE:
        raise RuleFormatError(line_number, len(tokens), path)

    subject, obj, access_spec = tokens
    return subject, obj, access_spec


def format_rule_line(subject: str, obj: str, access: Union[AccessMask, int],
                     layout: RuleLayout) -> str:
    """Format one rule as a newline-terminated rule file line"""
    access_str = format_access(access, layout)

    if layout == RuleLayout.KERNEL:
        label_width = RuleFileFormat.KERNEL_LABEL_WIDTH
        access_width = RuleFileFormat.KERNEL_ACCESS_WIDTH
        return (f"{subject:<{label_width}} {obj:<{label_width}} "
                f"{access_str:>{access_width}}\n")

    return f"{subject} {obj} {access_str}\n"


def read_rules(path: PathLike, subject_filter: Optional[str] = None) -> RuleStore:
    """
    Read a rule file into a new RuleStore.

    Every line must hold exactly three tokens; lines of other subjects are
    skipped when subject_filter is given. Nothing is returned unless the
    whole file parses.

    Raises:
        RuleFileError: If the file cannot be opened or read
        RuleFormatError: If a line is malformed
        LabelRangeError: If a rule has two overlong labels
    """
    path_str = os.fspath(path)
    encoding = get_rules_config().file_encoding

    try:
        # Binary mode so only "\n" terminates a line
        rule_file = open(path_str, "rb")
    except OSError as e:
        raise RuleFileError(path_str, "open", errno=e.errno, reason=str(e)) from e

    staging = RuleStore()
    try:
        with rule_file:
            for line_number, raw_line in enumerate(rule_file, start=1):
                line = raw_line.decode(encoding, RuleFileFormat.ENCODING_ERRORS)
                subject, obj, access_spec = parse_rule_line(line, line_number, path_str)
                if subject_filter is not None and subject != subject_filter:
                    continue
                staging.upsert(subject, obj, parse_access(access_spec))
    except (OSError, UnicodeDecodeError) as e:
        staging.destroy()
        raise RuleFileError(path_str, "read", errno=getattr(e, "errno", None),
                            reason=str(e)) from e
    except Exception:
        staging.destroy()
        raise

    logger.debug("Read rule file", path=path_str, rules=len(staging),
                 subject_filter=subject_filter)
    return staging


def load_rules(store: RuleStore, path: PathLike,
               subject_filter: Optional[str] = None) -> None:
    """
    Replace the content of store with the rules of a rule file.

    The replacement is wholesale: with subject_filter the store ends up
    holding only that subject's rules. On any error the store keeps its
    previous content and the error is re-raised.
    """
    if store.closed:
        raise RuleStoreClosedError("load_rules")

    try:
        staging = read_rules(path, subject_filter)
    except SmackRulesError as e:
        logger.warning("Rule file load aborted", path=os.fspath(path),
                       error=e.error_code, details=e.details)
        raise

    store.replace(staging)
    logger.debug("Loaded rule file", path=os.fspath(path), rules=len(store))


def save_rules(store: RuleStore, path: PathLike,
               layout: Optional[RuleLayout] = None) -> None:
    """
    Write every rule of store to path, creating or truncating the file.

    Rules are written subject by subject in store order. A write failure
    stops at once, leaving the lines already written, and is raised as a
    RuleFileError carrying the errno of the underlying OSError.
    """
    config = get_rules_config()
    layout = RuleLayout(layout or config.default_layout)
    path_str = os.fspath(path)

    # Collected before opening, which truncates the file
    rules = list(store.rules())

    try:
        rule_file = open(path_str, "w", encoding=config.file_encoding,
                         errors=RuleFileFormat.ENCODING_ERRORS, newline="")
    except OSError as e:
        raise RuleFileError(path_str, "open", errno=e.errno, reason=str(e)) from e

    count = 0
    try:
        with rule_file:
            for rule in rules:
                rule_file.write(format_rule_line(rule.subject, rule.object,
                                                 rule.access, layout))
                count += 1
    except OSError as e:
        raise RuleFileError(path_str, "write", errno=e.errno, reason=str(e)) from e

    logger.debug("Saved rule file", path=path_str, rules=count, layout=layout.value)
