"""JSON formatter for next-dehydrate."""

import json
from typing import Any

from ..pipeline import DehydrateResult
from .base import BaseFormatter


def generate_json_report(result: DehydrateResult) -> dict[str, Any]:
    """Build a JSON-serializable report: summary, pages in input order, errors."""
    stats = result.stats
    return {
        "buildMode": result.build.mode.value,
        "outputDir": str(result.output_dir),
        "summary": {
            "totalPages": stats.total_pages,
            "byClassification": {c.value: n for c, n in stats.by_classification.items()},
            "totalOriginalSize": stats.total_original_size,
            "totalNewSize": stats.total_new_size,
            "bytesSaved": stats.bytes_saved,
            "percentSaved": round(stats.percent_saved, 2),
            "totalScriptsRemoved": stats.total_scripts_removed,
            "totalPreloadsRemoved": stats.total_preloads_removed,
            "pagesWithRouter": stats.pages_with_router,
            "processingTimeMs": round(stats.processing_time_ms, 2),
        },
        "pages": [
            {
                "path": str(page.analysis.absolute_path),
                "source": str(page.analysis.source_path) if page.analysis.source_path else None,
                "classification": page.analysis.classification.value,
                "originalSize": page.analysis.original_size,
                "newSize": page.new_size,
                "scriptsRemoved": page.scripts_removed,
                "preloadsRemoved": page.preloads_removed,
                "routerInjected": page.router_injected,
                "indicators": page.analysis.indicators.to_dict(),
                "dependencies": [str(d) for d in page.analysis.dependencies],
            }
            for page in stats.pages
        ],
        "errors": [
            {"path": str(e.path), "stage": e.stage, "message": e.message} for e in result.errors
        ],
    }


class JsonFormatter(BaseFormatter):
    """Render the run as JSON."""

    def render(self, result: DehydrateResult) -> None:
        print(self.format(result))

    def format(self, result: DehydrateResult) -> str:
        return json.dumps(generate_json_report(result), indent=2)
