from pathlib import Path

import pytest


@pytest.fixture
def write_corpus(tmp_path: Path):
    """Writes documents plus the two list files, returns (docs_file, noise_file)."""

    def _write(docs: dict[str, str], noise_words: list[str] = ()) -> tuple[str, str]:
        paths = []
        for name, text in docs.items():
            path = tmp_path / name
            path.write_text(text, encoding="utf-8")
            paths.append(str(path))
        docs_file = tmp_path / "docs.txt"
        docs_file.write_text("\n".join(paths) + "\n", encoding="utf-8")
        noise_file = tmp_path / "noisewords.txt"
        noise_file.write_text("\n".join(noise_words) + "\n", encoding="utf-8")
        return str(docs_file), str(noise_file)

    return _write
