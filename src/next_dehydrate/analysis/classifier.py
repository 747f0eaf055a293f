"""Page classification from an aggregated indicator set."""

from ..models import IndicatorSet, PageClassification

_DESCRIPTIONS = {
    PageClassification.PURE_STATIC: "Pure Static (all scripts removed)",
    PageClassification.ROUTING_ONLY: "Routing Only (SPA router injected)",
    PageClassification.INTERACTIVE: "Interactive (scripts preserved)",
}


def classify(indicators: IndicatorSet) -> PageClassification:
    """Reduce *indicators* to a classification.

    Precedence, first match wins:
        1. closure-wide client code, or entry event handlers / hooks -> INTERACTIVE
        2. entry uses the navigation component -> ROUTING_ONLY
        3. otherwise -> PURE_STATIC
    """
    if indicators.is_interactive:
        return PageClassification.INTERACTIVE

    if indicators.has_client_navigation:
        return PageClassification.ROUTING_ONLY

    return PageClassification.PURE_STATIC


def describe_classification(classification: PageClassification) -> str:
    """Human-readable description of a classification."""
    return _DESCRIPTIONS[classification]
