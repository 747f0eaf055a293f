"""Script stripping and navigation-helper injection for HTML documents.

Removal is driven purely by matching script URLs and inline bodies against
the framework-runtime markers; element position never matters. Each
candidate element is either removed whole or left untouched.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup
from bs4.element import Tag

from ..exceptions import MalformedDocumentError
from ..logging_config import get_logger
from ..models import PageClassification
from ..scanning.patterns import EXECUTABLE_SCRIPT_TYPES, STRUCTURED_DATA_TYPE, is_framework_script

logger = get_logger(__name__)

_PARSER = "html.parser"


@dataclass(frozen=True)
class TransformResult:
    """Rewritten document and what was done to it."""

    html: str
    scripts_removed: int = 0
    preloads_removed: int = 0
    router_injected: bool = False


def transform(
    document: str,
    classification: PageClassification,
    navigation_helper: Optional[str] = None,
) -> TransformResult:
    """Apply the classification's script policy to *document*.

    INTERACTIVE documents are returned unchanged. PURE_STATIC and
    ROUTING_ONLY documents lose their framework scripts and preloads;
    ROUTING_ONLY documents additionally get *navigation_helper* appended
    to the body when one is given.

    Raises:
        MalformedDocumentError: If the document is empty, holds no
            elements or is rejected by the parser
    """
    if classification is PageClassification.INTERACTIVE:
        return TransformResult(html=document)

    soup = parse_document(document)
    scripts_removed = strip_framework_scripts(soup)
    preloads_removed = strip_framework_preloads(soup)

    logger.debug("Removed %d scripts, %d preloads", scripts_removed, preloads_removed)

    router_injected = False
    if classification is PageClassification.ROUTING_ONLY and navigation_helper:
        inject_navigation_helper(soup, navigation_helper)
        router_injected = True

    return TransformResult(
        html=str(soup),
        scripts_removed=scripts_removed,
        preloads_removed=preloads_removed,
        router_injected=router_injected,
    )


def parse_document(document: str) -> BeautifulSoup:
    """Parse *document* into a node tree, rejecting input with no markup."""
    if not document or not document.strip():
        raise MalformedDocumentError("document is empty")
    try:
        soup = BeautifulSoup(document, _PARSER)
    except ParserRejectedMarkup as e:
        raise MalformedDocumentError(str(e))
    if soup.find(True) is None:
        raise MalformedDocumentError("document contains no elements")
    return soup


def strip_framework_scripts(soup: BeautifulSoup) -> int:
    """Remove external and inline framework-runtime scripts. Returns the count removed."""
    removed = 0
    for script in soup.find_all("script"):
        if script.has_attr("src"):
            if is_framework_script(script.get("src")):
                script.decompose()
                removed += 1
            continue

        if not _is_executable(script):
            continue
        if is_framework_script(script.get_text()):
            script.decompose()
            removed += 1
    return removed


def strip_framework_preloads(soup: BeautifulSoup) -> int:
    """Remove preload/modulepreload/prefetch links that target framework scripts."""
    removed = 0
    for link in soup.find_all("link"):
        if _is_script_hint(link) and is_framework_script(link.get("href")):
            link.decompose()
            removed += 1
    return removed


def inject_navigation_helper(soup: BeautifulSoup, payload: str) -> None:
    """Append an inline script carrying *payload* as the last child of <body>.

    Documents that omit the optional <body> tags get the script as the last
    child of <html>, or of the document itself when <html> is omitted too.
    """
    container = soup.body if soup.body is not None else soup.html
    if container is None:
        container = soup
    script = soup.new_tag("script")
    script.string = payload
    container.append(script)


def _is_executable(script: Tag) -> bool:
    """Inline scripts with structured-data or unknown types are preserved verbatim."""
    script_type = (script.get("type") or "").strip().lower()
    if script_type == STRUCTURED_DATA_TYPE:
        return False
    return not script_type or script_type in EXECUTABLE_SCRIPT_TYPES


def _is_script_hint(link: Tag) -> bool:
    rel_attr = link.get("rel") or []
    if isinstance(rel_attr, str):
        rel_attr = rel_attr.split()
    rel = {value.lower() for value in rel_attr}
    as_script = (link.get("as") or "").lower() == "script"
    if "modulepreload" in rel:
        return True
    return as_script and bool(rel & {"preload", "prefetch"})
