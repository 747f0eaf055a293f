"""Shared fixtures: throwaway Next.js projects built under tmp_path."""

from pathlib import Path

import pytest

# Two framework scripts, one framework preload, one stylesheet
PAGE_HTML = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>{title}</title>
<link rel="stylesheet" href="/_next/static/css/app.css">
<link rel="preload" as="script" href="/_next/static/chunks/webpack.js">
</head>
<body>
<main><h1>{title}</h1>{body}</main>
<script src="/_next/static/chunks/main-app.js" async></script>
<script>(self.__next_f=self.__next_f||[]).push([0])</script>
</body>
</html>
"""

STATIC_SOURCE = """export default function Page() {
  return <main><h1>Hello</h1></main>;
}
"""

ROUTING_SOURCE = """import Link from "next/link";

export default function Page() {
  return <nav><Link href="/about">About</Link></nav>;
}
"""

STATEFUL_COMPONENT = """"use client";
import { useState } from "react";

export default function Counter() {
  const [count, setCount] = useState(0);
  return <button onClick={() => setCount(count + 1)}>{count}</button>;
}
"""


def render_page(title: str = "Home", body: str = "") -> str:
    return PAGE_HTML.format(title=title, body=body)


class ProjectBuilder:
    """Writes an app-router project with a static export under *root*."""

    def __init__(self, root: Path):
        self.root = root
        self.app_dir = root / "app"
        self.out_dir = root / "out"
        self.app_dir.mkdir(parents=True, exist_ok=True)
        (self.out_dir / "_next" / "static" / "chunks").mkdir(parents=True, exist_ok=True)
        (self.out_dir / "_next" / "static" / "chunks" / "main-app.js").write_text(
            "console.log('runtime');", encoding="utf-8"
        )

    def write(self, rel: str, content: str) -> Path:
        path = self.root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    def page(self, route: str, source: str, html: str | None = None) -> Path:
        """Write ``app/<route>/page.tsx`` and its exported document. Returns the HTML path."""
        self.write(f"app/{route}/page.tsx" if route else "app/page.tsx", source)
        html_rel = f"out/{route}.html" if route else "out/index.html"
        return self.write(html_rel, html if html is not None else render_page(route or "Home"))


@pytest.fixture
def project(tmp_path):
    """An empty static-export project."""
    return ProjectBuilder(tmp_path / "site")


@pytest.fixture
def mixed_project(project):
    """One page of each classification."""
    project.page("", STATIC_SOURCE)
    project.page("about", ROUTING_SOURCE)
    project.write("components/Counter.tsx", STATEFUL_COMPONENT)
    project.page(
        "counter",
        'import Counter from "@/components/Counter";\n\n'
        "export default function Page() {\n  return <Counter />;\n}\n",
    )
    return project
