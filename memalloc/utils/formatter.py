"""Build template context from allocation reports and render it as text.

Numbers are formatted here; the template only lays out the columns.
"""

from typing import Any, Dict, List, Sequence

from jinja2 import Environment, PackageLoader

from ..core.models import AllocationLine, AllocationReport
from ..core.units import ByteCount

TEMPLATE_PACKAGE = 'memalloc.utils'
DEFAULT_TEMPLATE = 'allocation.j2'

COLUMN_SEPARATOR = '\t'
ADDRESS_WIDTH = 21
BYTES_WIDTH = 13
PLACEHOLDER = '—'


def format_header() -> List[str]:
    """Column headings of an allocation table."""
    return [
        f"{'addr':{ADDRESS_WIDTH}}",
        f"{'size':7}",
        f"({'bytes':^{BYTES_WIDTH}})",
        f"{'%':>8}",
        'name',
    ]


def format_row(address: str, size: ByteCount, percent: float, name: str) -> List[str]:
    """Format the size, human size and percentage columns of one row."""
    return [
        address,
        f"0x{size:05x}",
        f"({size.human():>{BYTES_WIDTH}})",
        f"{percent:7.3f}%",
        name,
    ]


def format_line(line: AllocationLine) -> List[str]:
    """Format a section or padding line."""
    if line.is_padding:
        return format_row(f"{'(padding)':>{ADDRESS_WIDTH}}", line.size, line.percent, PLACEHOLDER)
    return format_row(f"0x{line.start:x}-0x{line.end:x}", line.size, line.percent, line.name)


def build_allocation_template_context(reports: Sequence[AllocationReport]) -> Dict[str, Any]:
    """
    Build template context from allocation reports.

    Returns:
        Dictionary with template variables:
        - regions: list of {name, rows, total} with rows as column lists
        - header: column headings
        - separator: column separator
    """
    regions = []
    for report in reports:
        regions.append({
            'name': report.region.name,
            'rows': [format_line(line) for line in report.lines],
            'total': format_row(
                f"{'total':>{ADDRESS_WIDTH}}", report.total, report.percent, PLACEHOLDER),
        })

    return {
        'regions': regions,
        'header': format_header(),
        'separator': COLUMN_SEPARATOR,
    }


def render_allocation_template(context: Dict[str, Any], template_name: str = DEFAULT_TEMPLATE) -> str:
    """Render one of the templates shipped in ``memalloc/utils/templates``.

    Raises:
        jinja2.TemplateNotFound: If no shipped template has that name
    """
    env = Environment(
        loader=PackageLoader(TEMPLATE_PACKAGE, 'templates'),
        trim_blocks=True,
        lstrip_blocks=True,
    )
    return env.get_template(template_name).render(**context)
