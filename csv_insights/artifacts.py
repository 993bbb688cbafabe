from pathlib import Path
import json
import time
import uuid
from typing import Dict, Any

from .formatting import fmt_number, currency_fmt
from .models import AnalysisResult


def _now_id() -> str:
    return time.strftime("%Y%m%d_%H%M%S") + "_" + uuid.uuid4().hex[:8]


def make_run_dir(base: str, run_id: str) -> str:
    basep = Path(base) / run_id
    basep.mkdir(parents=True, exist_ok=True)
    return str(basep)


def render_markdown(result: AnalysisResult) -> str:
    s = result.dataset_summary
    md_lines = []
    md_lines.append("# CSV Analysis Report\n")
    md_lines.append(f"**Rows:** {s.total_rows}\n")
    md_lines.append(f"- **Numeric columns**: {', '.join(s.numeric_columns) or 'none'}")
    md_lines.append(f"- **Categorical columns**: {', '.join(s.categorical_columns) or 'none'}")
    md_lines.append(f"- **Date columns**: {', '.join(s.date_columns) or 'none'}")

    if result.numeric_analysis:
        md_lines.append("\n## Numeric Columns\n")
        md_lines.append("| column | count | mean | median | std_dev | min | max | outliers |")
        md_lines.append("|---|---|---|---|---|---|---|---|")
        for c, p in result.numeric_analysis.items():
            md_lines.append(
                f"| {c} | {p.count} | {fmt_number(p.mean)} | {fmt_number(p.median)} | "
                f"{fmt_number(p.std_dev)} | {fmt_number(p.min)} | {fmt_number(p.max)} | {len(p.outliers)} |"
            )

    if result.categorical_analysis:
        md_lines.append("\n## Categorical Columns\n")
        md_lines.append("| column | unique | most frequent | least frequent |")
        md_lines.append("|---|---|---|---|")
        for c, p in result.categorical_analysis.items():
            md_lines.append(
                f"| {c} | {p.unique_values} | {p.most_frequent or 'N/A'} | {p.least_frequent or 'N/A'} |"
            )

    fin = result.financial_insights
    if fin.amount_column or fin.anomaly_summary:
        md_lines.append("\n## Financial Insights\n")
        if fin.amount_column:
            md_lines.append(f"**Amount column:** {fin.amount_column}\n")
        for e in fin.high_value_entries:
            md_lines.append(f"- Row {e.row_index}: {currency_fmt(e.value)}")
        if fin.category_wise_totals:
            md_lines.append("\n### Category Totals\n")
            for k, v in fin.category_wise_totals.items():
                md_lines.append(f"- **{k}**: {currency_fmt(v)}")

    md_lines.append("\n## Insights\n")
    for i in result.overall_insights or ['No notable findings.']:
        md_lines.append(f"- {i}")

    if result.warnings:
        md_lines.append("\n## Warnings\n")
        for w in result.warnings:
            md_lines.append(f"- {w}")

    return '\n'.join(md_lines) + '\n'


def write_report(result: AnalysisResult, output_dir: str, run_id: str = None) -> Dict[str, Any]:
    run_id = run_id or _now_id()
    p = Path(make_run_dir(output_dir, run_id))
    report = {
        'run_id': run_id,
        'created_at': time.strftime('%Y-%m-%dT%H:%M:%S'),
        'analysis': result.to_dict(),
    }
    with open(p / 'report.json', 'w', encoding='utf-8') as f:
        json.dump(report, f, indent=2, default=str)
    (p / 'report.md').write_text(render_markdown(result), encoding='utf-8')
    return {'run_id': run_id, 'json': str(p / 'report.json'), 'markdown': str(p / 'report.md')}
