"""Phase 1, Step 1.1: DDL Parsing.

Extract the table name, attribute universe and stated primary key from
CREATE TABLE text. Deterministic transformation - no SQL validation is done.
"""

import re
from typing import List, Optional

from FDNORM.utils.logging import get_logger
from FDNORM.utils.error_handling import DDLParseError, ErrorContext
from FDNORM.ir.models import ParsedDDL

logger = get_logger(__name__)

_CREATE_TABLE_RE = re.compile(
    r"CREATE\s+TABLE\s+(?:IF\s+NOT\s+EXISTS\s+)?([^\s(]+)",
    re.IGNORECASE,
)
_TABLE_PRIMARY_KEY_RE = re.compile(r"PRIMARY\s+KEY\s*\(([^)]*)\)", re.IGNORECASE)
_INLINE_PRIMARY_KEY_RE = re.compile(r"\bPRIMARY\s+KEY\b", re.IGNORECASE)
_LINE_COMMENT_RE = re.compile(r"--[^\n]*")

# Body items starting with one of these are table constraints, not columns
_CONSTRAINT_KEYWORDS = {"PRIMARY", "FOREIGN", "UNIQUE", "CONSTRAINT", "CHECK", "KEY", "INDEX"}


def _strip_identifier(token: str) -> str:
    return token.strip().strip('`"[]')


def _split_top_level(body: str) -> List[str]:
    """Split on commas that are not nested inside parentheses."""
    items: List[str] = []
    depth = 0
    current: List[str] = []
    for ch in body:
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth = max(0, depth - 1)
        if ch == "," and depth == 0:
            items.append("".join(current))
            current = []
        else:
            current.append(ch)
    items.append("".join(current))
    return [item.strip() for item in items if item.strip()]


def _append_unique(target: List[str], name: str) -> None:
    if name and name not in target:
        target.append(name)


def step_1_1_ddl_parsing(ddl_text: str) -> ParsedDDL:
    """
    Step 1.1 (deterministic): Parse CREATE TABLE text into a ParsedDDL.

    Args:
        ddl_text: Free-form DDL text, possibly spanning several lines

    Returns:
        ParsedDDL: table name, attributes in declaration order, stated primary key

    Raises:
        DDLParseError: If the text has no parenthesized column list

    Example:
        >>> ddl = step_1_1_ddl_parsing("CREATE TABLE t (A INT, B INT, PRIMARY KEY (A))")
        >>> ddl.attributes, ddl.primary_key
        (['A', 'B'], ['A'])
    """
    logger.info("Starting Step 1.1: DDL Parsing (deterministic)")

    text = _LINE_COMMENT_RE.sub("", ddl_text or "").replace("\r", " ").replace("\n", " ")

    start = text.find("(")
    end = text.rfind(")")
    if start == -1 or end <= start:
        source_lines = (ddl_text or "").strip().splitlines()
        raise DDLParseError(
            context=ErrorContext(
                step_id="1.1",
                phase=1,
                source_line=source_lines[0][:120] if source_lines else None,
            )
        )

    table_match = _CREATE_TABLE_RE.search(text[:start + 1])
    table_name: Optional[str] = _strip_identifier(table_match.group(1)) if table_match else None

    attributes: List[str] = []
    primary_key: List[str] = []

    for item in _split_top_level(text[start + 1:end]):
        first_word = item.split()[0]
        if first_word.upper() in _CONSTRAINT_KEYWORDS:
            pk_match = _TABLE_PRIMARY_KEY_RE.search(item)
            if pk_match:
                for token in pk_match.group(1).split(","):
                    _append_unique(primary_key, _strip_identifier(token))
            else:
                logger.debug(f"Skipping table constraint: {item}")
            continue

        name = _strip_identifier(first_word)
        if not name:
            continue
        _append_unique(attributes, name)
        if _INLINE_PRIMARY_KEY_RE.search(item[len(first_word):]):
            _append_unique(primary_key, name)

    parsed = ParsedDDL(table_name=table_name, attributes=attributes, primary_key=primary_key)

    unknown_pk = [a for a in primary_key if a not in attributes]
    if unknown_pk:
        logger.warning(
            f"Stated primary key references undeclared attributes: {', '.join(unknown_pk)}"
        )

    logger.info(
        f"DDL parsing completed: table={table_name or '<unnamed>'}, "
        f"{len(attributes)} attributes, primary key=({', '.join(primary_key)})"
    )
    return parsed
