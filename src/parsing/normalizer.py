"""Cleanup rules for text extracted from inspection reports.

Every page of an entrada/saída report repeats the same boilerplate: the
document code and version stamp, template placeholders, initials markers,
page-number footers and, at the end, the signature block. None of it says
anything about the inspected property, and left in place it dominates any
comparison between two reports. The rules below strip it.

Rules run in a fixed order. Blank-line collapsing must come last because the
content rules leave gaps behind.
"""

import logging
import re
from collections.abc import Sequence
from dataclasses import dataclass

logger = logging.getLogger(__name__)

# Horizontal whitespace only; rules must not eat line breaks they do not own.
_HSPACE = r"[^\S\r\n]"


@dataclass(frozen=True)
class NormalizationRule:
    """A pattern whose matches are all replaced in the text.

    Attributes:
        name: Short identifier used in logs and tests.
        pattern: Compiled regular expression.
        replacement: Replacement string for every match.
    """

    name: str
    pattern: re.Pattern[str]
    replacement: str = ""


def _token_pattern(token: str) -> re.Pattern[str]:
    # A line holding nothing but tokens goes away with its line break;
    # elsewhere only the token and the spaces after it are removed.
    return re.compile(
        rf"^{_HSPACE}*(?:{token}{_HSPACE}*)+(?:\r\n|\r|\n|$)|{token}{_HSPACE}*",
        re.MULTILINE,
    )


REPORT_CODE = NormalizationRule(
    name="report_code",
    pattern=_token_pattern(
        rf"[A-Z]+\.\d{{3}}\.\d{{6}}{_HSPACE}*-{_HSPACE}*Versão{_HSPACE}+\d\.\d"
    ),
)

TEMPLATE_PLACEHOLDER = NormalizationRule(
    name="template_placeholder",
    pattern=_token_pattern(r"\$[A-Za-z]+(?:_[A-Za-z]+)*_\d+\$"),
)

INITIALS_MARKER = NormalizationRule(
    name="initials_marker",
    pattern=_token_pattern(r"Rub\d+"),
)

PAGINATION_LINE = NormalizationRule(
    name="pagination_line",
    pattern=re.compile(
        rf"^{_HSPACE}*\d+{_HSPACE}*/{_HSPACE}*\d+{_HSPACE}*(?:\r\n|\r|\n|$)",
        re.MULTILINE,
    ),
)

SIGNATURE_BLOCK = NormalizationRule(
    name="signature_block",
    pattern=re.compile(r"\bAssinaturas\b.*", re.DOTALL),
)

# Lines holding only spaces count as blank. A lone \r only counts when it is
# not the first half of \r\n, otherwise a single CRLF would be read as two
# line breaks. The indentation of the line after the run is kept.
BLANK_LINE_RUNS = NormalizationRule(
    name="blank_line_runs",
    pattern=re.compile(rf"(?:{_HSPACE}*(?:\r\n|\r(?!\n)|\n)){{2,}}"),
    replacement="\n\n",
)

DEFAULT_RULES: tuple[NormalizationRule, ...] = (
    REPORT_CODE,
    TEMPLATE_PLACEHOLDER,
    INITIALS_MARKER,
    PAGINATION_LINE,
    SIGNATURE_BLOCK,
    BLANK_LINE_RUNS,
)


def apply_rule(text: str, rule: NormalizationRule) -> str:
    """Replace every match of a single rule."""
    return rule.pattern.sub(rule.replacement, text)


def _run_rules(text: str, rules: Sequence[NormalizationRule]) -> str:
    for rule in rules:
        text = apply_rule(text, rule)
    return text.strip()


def normalize_text(raw: str, rules: Sequence[NormalizationRule] = DEFAULT_RULES) -> str:
    """Strip report boilerplate and collapse blank-line runs.

    The rule sequence is re-applied until the text stops changing: cutting
    the signature block, for example, can leave a page-number footer alone
    on the last line, which only the next pass removes. Every rule deletes
    or shortens, so the loop always ends.

    Args:
        raw: Text produced by the PDF extractor. May be empty.
        rules: Ordered rules to apply. Defaults to the report rules.

    Returns:
        Clean text without leading or trailing whitespace.
    """
    text = raw
    passes = 0
    while True:
        cleaned = _run_rules(text, rules)
        passes += 1
        if cleaned == text:
            break
        text = cleaned

    logger.debug(f"Normalized {len(raw)} -> {len(text)} chars in {passes} pass(es)")
    return text
