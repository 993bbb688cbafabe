"""CSV Insights - Flask upload surface

Endpoints:
- POST /analyze   -> upload a CSV file (field "csvFile"), return the analysis
                     as JSON, or as markdown / HTML with ?format=markdown|html
- GET  /health    -> liveness check

Input errors (no file, binary payload, header-only CSV) answer 400, oversized
uploads 413, anything unexpected 500 with a single message string.
"""
from __future__ import annotations

import logging
from html import escape
from typing import Optional

from flask import Flask, request, jsonify, Response

from .artifacts import render_markdown, write_report
from .errors import MalformedInput, UploadRejected
from .pipeline import AnalysisConfig, run_analysis
from .validator import validate_upload

try:
    import markdown2
    HAS_MARKDOWN = True
except Exception:
    HAS_MARKDOWN = False

log = logging.getLogger("csv_insights.app")


def _render_html(md: str) -> str:
    if HAS_MARKDOWN:
        body = markdown2.markdown(md, extras=['tables'])
    else:
        body = f"<pre>{escape(md)}</pre>"
    return f"<!DOCTYPE html><html><head><title>CSV Analysis</title></head><body>{body}</body></html>"


def create_app(cfg: Optional[AnalysisConfig] = None) -> Flask:
    cfg = cfg or AnalysisConfig.from_env()
    logging.basicConfig(level=cfg.log_level)

    app = Flask(__name__)
    app.config['MAX_CONTENT_LENGTH'] = cfg.max_upload_mb * 1024 * 1024
    app.config['ANALYSIS_CONFIG'] = cfg

    @app.route('/health')
    def health():
        return jsonify({'status': 'ok'})

    @app.route('/analyze', methods=['POST'])
    def analyze():
        f = request.files.get('csvFile')
        if f is None:
            log.info("No file uploaded")
            return jsonify({'error': 'No CSV file uploaded'}), 400

        try:
            raw = f.read()
            log.info(f"File received: {f.filename} ({len(raw)} bytes)")
            text, warnings = validate_upload(raw, f.filename, {'max_upload_mb': cfg.max_upload_mb})
            for w in warnings:
                log.warning(w)
            result = run_analysis(text)
        except (UploadRejected, MalformedInput) as e:
            log.warning(f"Rejected upload: {e}")
            return jsonify({'error': 'Failed to analyze CSV', 'details': str(e)}), 400
        except Exception as e:
            log.exception("CSV analysis failed")
            return jsonify({'error': 'Failed to analyze CSV', 'details': str(e)}), 500

        headers = {}
        if cfg.output_dir:
            try:
                saved = write_report(result, cfg.output_dir)
                headers['X-Report-Id'] = saved['run_id']
            except OSError:
                log.exception("Report export failed")

        fmt = (request.args.get('format') or 'json').lower()
        if fmt == 'markdown':
            return Response(render_markdown(result), mimetype='text/markdown', headers=headers)
        if fmt == 'html':
            return Response(_render_html(render_markdown(result)), mimetype='text/html', headers=headers)
        resp = jsonify(result.to_dict())
        resp.headers.update(headers)
        return resp

    @app.errorhandler(413)
    def file_too_large(e):
        """Handle file too large errors."""
        return jsonify({'error': f'File too large. Maximum size: {cfg.max_upload_mb}MB'}), 413

    return app


app = create_app()
