"""
Validation of rendered markup against the allowed output dialect.

The renderers only ever emit ``span`` elements carrying ``style``, ``class``,
``title`` and ``data-*`` attributes, nested at most one level deep. This
module parses markup with lxml and reports anything outside that dialect, so
callers embedding rendered output (and the test suite) can check it.

Validates:
1. Markup parses as an HTML fragment
2. Only allowed elements are present (no script or style elements)
3. Only allowed attributes are present (no event handlers, no href/src)
4. Nesting depth does not exceed one level
5. No comments or processing instructions
"""

import logging

from lxml import etree
from lxml import html as lxml_html

from .constants import (
    ALLOWED_ATTRIBUTE_PREFIX,
    ALLOWED_ATTRIBUTES,
    ALLOWED_TAGS,
    MAX_NESTING_DEPTH,
)
from .errors import ValidationError

logger = logging.getLogger(__name__)


def _parse_fragment(markup: str) -> etree._Element:
    """Parse markup inside a wrapper element and return the wrapper."""
    return lxml_html.fragment_fromstring(f"<div>{markup}</div>")


def validate_markup(markup: str | None) -> list[str]:
    """Check markup against the allowed output dialect.

    Args:
        markup: Markup produced by one of the renderers

    Returns:
        List of human-readable violations; empty when the markup is valid

    Example:
        >>> validate_markup('<span class="x">ok</span>')
        []
        >>> validate_markup("<script>alert(1)</script>")
        ['Element <script> is not allowed']
    """
    if not markup or not markup.strip():
        return []

    try:
        wrapper = _parse_fragment(markup)
    except (etree.ParserError, etree.XMLSyntaxError) as e:
        return [f"Markup could not be parsed: {e}"]

    errors: list[str] = []

    for element in wrapper.iterdescendants():
        if not isinstance(element.tag, str):
            errors.append("Comments and processing instructions are not allowed")
            continue

        if element.tag not in ALLOWED_TAGS:
            errors.append(f"Element <{element.tag}> is not allowed")

        for name in element.attrib:
            if name in ALLOWED_ATTRIBUTES or name.startswith(ALLOWED_ATTRIBUTE_PREFIX):
                continue
            errors.append(f"Attribute '{name}' on <{element.tag}> is not allowed")

        # Count only ancestors below the wrapper; lxml places it inside html/body
        depth = 0
        parent = element.getparent()
        while parent is not None and parent is not wrapper:
            depth += 1
            parent = parent.getparent()
        if depth > MAX_NESTING_DEPTH:
            errors.append(
                f"Element <{element.tag}> is nested {depth} levels deep "
                f"(maximum {MAX_NESTING_DEPTH})"
            )

    if errors:
        logger.debug("Markup failed validation with %d errors", len(errors))
    return errors


def ensure_valid_markup(markup: str | None) -> None:
    """Raise ValidationError if markup falls outside the allowed dialect."""
    errors = validate_markup(markup)
    if errors:
        raise ValidationError("Markup does not match the allowed dialect", errors)


def markup_text(markup: str | None) -> str:
    """Return the text content of markup, with all elements removed and entities decoded."""
    if not markup:
        return ""
    return str(_parse_fragment(markup).text_content())
