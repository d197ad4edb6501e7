"""
Import block aggregation for generated Go files.

Per-table import lists may repeat packages; they are deduplicated here,
once, across every struct in the file.
"""

from typing import Iterable, List, Set

from ...core.templates import TemplateEngine, create_template_engine

IMPORTS_TEMPLATE = """\
{% if packages|length == 1 %}
import "{{ packages[0] }}"

{% elif packages %}
import (
{% for package in packages %}
\t"{{ package }}"
{% endfor %}
)

{% endif %}
"""


class ImportAggregator:
    """Collects the distinct imports required by all emitted structs."""

    def __init__(self, template_engine: TemplateEngine = None):
        self._packages: Set[str] = set()
        self._engine = template_engine or create_template_engine(
            {"imports.go.j2": IMPORTS_TEMPLATE}
        )

    def add(self, imports: Iterable[str]):
        """Merge one table's import list into the running set."""
        self._packages.update(imp for imp in imports if imp)

    @property
    def packages(self) -> List[str]:
        """Distinct packages sorted ascending."""
        return sorted(self._packages)

    def __len__(self) -> int:
        return len(self._packages)

    def render(self) -> str:
        """
        Render the import block.

        Returns:
            "" for no imports, a single-line import for one package, or a
            parenthesized block with one package per line for several. A
            non-empty block ends with a blank line.
        """
        return self._engine.render_template(
            "imports.go.j2", {"packages": self.packages}
        )


def aggregate_imports(import_lists: Iterable[Iterable[str]]) -> str:
    """Deduplicate the per-table import lists and render the import block."""
    aggregator = ImportAggregator()
    for imports in import_lists:
        aggregator.add(imports)
    return aggregator.render()
