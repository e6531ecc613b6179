import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT / "src") not in sys.path:
    sys.path.insert(0, str(ROOT / "src"))

import pytest


SAMPLE_RECORD = [
    "PMID- 12345",
    "XY  - Unused field",
    "AB  - This is the abstract's first line",
    "      and this is its second line;",
    "      with conclusion.",
    "FAU - Blachly, James S",
    "AU  - Blachly JS",
    "FAU - Gregory, Charles Thomas",
    "AU  - Gregory CT",
]


@pytest.fixture()
def sample_record() -> list:
    return list(SAMPLE_RECORD)


@pytest.fixture()
def sample_nbib_text() -> str:
    """Two citations as exported by PubMed, with a leading blank line."""

    return "\n".join(
        [
            "",
            *SAMPLE_RECORD,
            "TI  - Clonal evolution in leukemia.",
            "DP  - 2020 Mar 15",
            "PT  - Journal Article",
            "AID - 10.1000/xyz123 [doi]",
            "",
            "PMID- 67890",
            "TI  - A second article about",
            "      reference managers.",
            "FED - Doe, Jane",
            "ED  - Doe J",
            "JT  - Journal of Testing",
            "",
        ]
    )


@pytest.fixture()
def sample_nbib_path(tmp_path: Path, sample_nbib_text: str) -> Path:
    path = tmp_path / "pubmed-export.nbib"
    path.write_text(sample_nbib_text, encoding="utf-8")
    return path
