"""FastAPI + Tailwind interface for the nbib converter.

Run with:
    uvicorn nbib_csl.web:app --reload
"""
from __future__ import annotations

from html import escape

from fastapi import FastAPI, File, Form, HTTPException, UploadFile
from fastapi.responses import HTMLResponse, JSONResponse

from .app import NbibConverterApp
from .errors import NbibError
from .exporters import to_csl_items
from .logging_utils import get_logger, log_exception
from .report import render_report
from .tags import recognized_tags

app = FastAPI(title="nbib to CSL-JSON", description="Convert PubMed exports from the browser")

logger = get_logger("web")


def _layout(content: str) -> str:
    """Wrap provided content in a Tailwind-powered HTML page."""

    return f"""
    <!doctype html>
    <html lang=\"en\" class=\"h-full bg-gray-50\">
    <head>
        <meta charset=\"utf-8\" />
        <title>nbib to CSL-JSON</title>
        <link href=\"https://cdn.jsdelivr.net/npm/tailwindcss@3.4.4/dist/tailwind.min.css\" rel=\"stylesheet\" />
    </head>
    <body class=\"min-h-full py-10\">
        <div class=\"max-w-5xl mx-auto px-4\">
            <div class=\"bg-white shadow rounded-lg p-6\">
                <h1 class=\"text-3xl font-semibold text-gray-900\">nbib to CSL-JSON</h1>
                <p class=\"text-gray-600 mt-2\">Paste MEDLINE/PubMed records to get CSL-JSON for your reference manager.</p>
                {content}
            </div>
        </div>
    </body>
    </html>
    """


def _form_page(report: str | None = None, output: str | None = None, strict: bool = False) -> str:
    """Render the landing page with optional report and JSON output."""

    strict_checkbox = "checked" if strict else ""
    tags = ", ".join(recognized_tags())

    text_form = f"""
    <form action=\"/convert-text\" method=\"post\" class=\"bg-gray-50 border border-gray-200 rounded-lg p-4 mt-6\">
        <h2 class=\"text-xl font-semibold text-gray-800\">Paste nbib records</h2>
        <p class=\"text-gray-600 text-sm mb-3\">Separate citations with a blank line. Recognized tags: {tags}.</p>
        <label class=\"block text-sm font-medium text-gray-700 mb-2\" for=\"text\">nbib text</label>
        <textarea name=\"text\" required placeholder=\"PMID- 12345&#10;TI  - Article title...\" class=\"w-full h-44 border border-gray-300 rounded-md p-3 text-sm font-mono\"></textarea>
        <div class=\"flex items-center gap-2 mt-3\">
            <input type=\"checkbox\" id=\"strict\" name=\"strict\" value=\"1\" {strict_checkbox} class=\"h-4 w-4 text-indigo-600 border-gray-300 rounded\" />
            <label for=\"strict\" class=\"text-sm text-gray-700\">Stop at the first malformed citation</label>
        </div>
        <button type=\"submit\" class=\"mt-4 inline-flex items-center px-4 py-2 bg-indigo-600 text-white rounded-md shadow hover:bg-indigo-700\">Convert</button>
    </form>
    """

    report_block = ""
    if report:
        report_block = f"""
        <div class=\"mt-8\">
            <h2 class=\"text-xl font-semibold text-gray-800\">Conversion Report</h2>
            <pre class=\"mt-3 bg-gray-900 text-green-100 p-4 rounded-lg whitespace-pre-wrap text-sm\">{escape(report)}</pre>
        </div>
        """

    output_block = ""
    if output:
        output_block = f"""
        <div class=\"mt-6\">
            <h2 class=\"text-xl font-semibold text-gray-800\">CSL-JSON</h2>
            <pre class=\"mt-3 bg-gray-100 text-gray-900 p-4 rounded-lg whitespace-pre-wrap text-sm\">{escape(output)}</pre>
        </div>
        """

    return _layout(text_form + report_block + output_block)


@app.get("/", response_class=HTMLResponse)
async def home() -> HTMLResponse:
    """Serve the text submission form."""

    return HTMLResponse(_form_page())


@app.post("/convert-text", response_class=HTMLResponse)
async def convert_text(text: str = Form(...), strict: bool = Form(False)) -> HTMLResponse:
    """Convert pasted nbib text and render the report with the JSON output."""

    converter = NbibConverterApp(strict=strict)
    try:
        result = converter.convert_text(text)
    except NbibError as exc:
        log_exception("Strict conversion of pasted text aborted", exc, logger)
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    report = render_report(result)
    return HTMLResponse(_form_page(report, converter.to_json(result), strict=strict))


@app.post("/api/convert")
async def convert_upload(file: UploadFile = File(...), strict: bool = Form(False)) -> JSONResponse:
    """Convert an uploaded nbib file and return CSL items plus skipped-block issues."""

    raw = await file.read()
    text = raw.decode("utf-8-sig", errors="replace")
    converter = NbibConverterApp(strict=strict)
    try:
        result = converter.convert_text(text)
    except NbibError as exc:
        log_exception(f"Strict conversion of {file.filename} aborted", exc, logger)
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    return JSONResponse(
        {
            "items": to_csl_items(result.records),
            "issues": [
                {
                    "code": issue.code,
                    "message": issue.message,
                    "block": issue.block,
                    "context": issue.context,
                    "severity": issue.severity,
                }
                for issue in result.issues
            ],
        }
    )


def main() -> None:
    """Run the FastAPI app using uvicorn."""

    import uvicorn

    uvicorn.run("nbib_csl.web:app", host="0.0.0.0", port=8000, reload=False)


__all__ = ["app", "main"]
