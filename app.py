from __future__ import annotations

import sys
from pathlib import Path
from typing import Dict, List

import pandas as pd
import streamlit as st

ROOT = Path(__file__).resolve().parent
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from nbib_csl.app import NbibConverterApp  # noqa: E402
from nbib_csl.errors import NbibError  # noqa: E402
from nbib_csl.models import CitationRecord, ConversionResult  # noqa: E402
from nbib_csl.report import render_report  # noqa: E402


def _format_names(record: CitationRecord, key: str) -> str:
    names = []
    for parts in record.names_for(key):
        if parts.given:
            names.append(f"{parts.family}, {parts.given}")
        elif parts.family:
            names.append(parts.family)
    return "; ".join(names)


def _build_rows(result: ConversionResult) -> List[Dict[str, str]]:
    rows = []
    for record in result.records:
        issued = next((date.parts.raw for date in record.dates if date.key == "issued"), None)
        rows.append(
            {
                "ID": record.identifier,
                "Title": "; ".join(record.field_values("title")),
                "Authors": _format_names(record, "author"),
                "Editors": _format_names(record, "editor"),
                "Journal": "; ".join(record.field_values("container-title")),
                "Issued": issued or "",
                "DOI": "; ".join(record.field_values("DOI")),
                "Note": " | ".join(record.field_values("note")),
            }
        )
    return rows


def main() -> None:
    st.set_page_config(page_title="nbib to CSL-JSON", layout="wide")
    st.title("nbib to CSL-JSON")
    st.caption("Paste MEDLINE/PubMed records (blank line between citations) to preview and export CSL-JSON.")

    strict = st.checkbox(
        "Stop at the first malformed citation",
        value=False,
        help="When unchecked, malformed citations are skipped and listed in the report.",
    )
    indent = st.number_input("JSON indentation", min_value=0, max_value=8, value=2, step=1)

    nbib_text = st.text_area(
        "nbib records",
        placeholder="PMID- 12345\nTI  - Article title\nFAU - Doe, Jane",
        height=260,
    )

    if st.button("Convert"):
        if not nbib_text.strip():
            st.warning("Paste at least one nbib record first.")
            return
        converter = NbibConverterApp(strict=strict, indent=int(indent))
        try:
            result = converter.convert_text(nbib_text)
        except NbibError as exc:
            st.error(f"Conversion aborted: {exc}")
            return

        st.code(render_report(result), language="text")
        rows = _build_rows(result)
        if not rows:
            st.info("No citations could be converted.")
            return

        st.dataframe(pd.DataFrame(rows), use_container_width=True, hide_index=True)
        st.download_button(
            "Download CSL-JSON",
            data=converter.to_json(result),
            file_name="citations.json",
            mime="application/json",
        )


if __name__ == "__main__":
    main()
