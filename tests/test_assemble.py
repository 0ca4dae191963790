"""Tests for document assembly and the output header format."""

from __future__ import annotations

from pathlib import Path

from solscrape.core.assemble import SEPARATOR, AssembleOptions, assemble, format_header
from solscrape.core.discover import discover
from solscrape.model import SourceFile


def _source(root: Path, rel: str, text: str) -> SourceFile:
    p = root / rel
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(text, encoding="utf-8")
    return SourceFile(path=p, relative_path=rel)


class TestHeader:
    def test_separator_shape(self):
        assert SEPARATOR.startswith("// ")
        assert SEPARATOR[3:] == "═" * 70

    def test_header_lines(self):
        assert format_header("src/A.sol").splitlines() == [
            SEPARATOR,
            "// File: src/A.sol",
            SEPARATOR,
        ]


class TestAssemble:
    """Ordering, headers, and per-file failure handling."""

    def test_headers_in_discovery_order(self, tmp_path: Path):
        a = _source(tmp_path, "a.sol", "// a\ncontract A {}\n")
        b = _source(tmp_path, "b.sol", "contract B {} // b\n")

        doc = assemble([a, b], AssembleOptions(emit_headers=True))

        assert doc.text == (
            f"{SEPARATOR}\n// File: a.sol\n{SEPARATOR}\ncontract A {{}}\n"
            f"{SEPARATOR}\n// File: b.sol\n{SEPARATOR}\ncontract B {{}}\n"
        )
        assert doc.files == ["a.sol", "b.sol"]

    def test_order_follows_input_not_name(self, tmp_path: Path):
        a = _source(tmp_path, "a.sol", "contract A {}\n")
        b = _source(tmp_path, "b.sol", "contract B {}\n")
        doc = assemble([b, a])
        assert doc.text.index("// File: b.sol") < doc.text.index("// File: a.sol")

    def test_without_headers_bodies_are_concatenated(self, tmp_path: Path):
        a = _source(tmp_path, "a.sol", "contract A {}\n")
        b = _source(tmp_path, "b.sol", "contract B {}\n")
        doc = assemble([a, b], AssembleOptions(emit_headers=False))
        assert doc.text == "contract A {}\ncontract B {}\n"

    def test_missing_final_newline_is_added(self, tmp_path: Path):
        a = _source(tmp_path, "a.sol", "contract A {}")
        b = _source(tmp_path, "b.sol", "contract B {}")
        doc = assemble([a, b], AssembleOptions(emit_headers=False))
        assert doc.text == "contract A {}\ncontract B {}\n"
        assert doc.line_count == 2

    def test_empty_after_cleaning_contributes_nothing(self, tmp_path: Path):
        empty = _source(tmp_path, "empty.sol", "// only a comment\n\n")
        real = _source(tmp_path, "real.sol", "contract R {}\n")
        doc = assemble([empty, real])
        assert doc.files == ["real.sol"]
        assert "empty.sol" not in doc.text
        assert not doc.warnings

    def test_undecodable_file_is_warned_and_skipped(self, tmp_path: Path):
        bad = tmp_path / "bad.sol"
        bad.write_bytes(b"contract \xff\xfe {}\n")
        good = _source(tmp_path, "good.sol", "contract G {}\n")

        doc = assemble([SourceFile(bad, "bad.sol"), good])

        assert doc.files == ["good.sol"]
        assert len(doc.warnings) == 1
        assert doc.warnings[0].relative_path == "bad.sol"
        assert "utf-8" in doc.warnings[0].message

    def test_vanished_file_is_warned_and_skipped(self, tmp_path: Path):
        ghost = SourceFile(tmp_path / "ghost.sol", "ghost.sol")
        doc = assemble([ghost])
        assert not doc
        assert [w.relative_path for w in doc.warnings] == ["ghost.sol"]

    def test_string_contents_survive(self, tmp_path: Path):
        src = _source(
            tmp_path,
            "s.sol",
            'string constant U = "ipfs://x/*y*/"; // tail\n',
        )
        doc = assemble([src], AssembleOptions(emit_headers=False))
        assert doc.text == 'string constant U = "ipfs://x/*y*/";\n'


def test_fixture_project_document():
    root = Path(__file__).resolve().parent / "fixtures" / "repos" / "sol_project"
    doc = assemble(discover(root))

    assert doc.files == ["src/Token.sol", "src/access/Ownable.sol", "testing/Helper.sol"]
    text = doc.text
    assert text.startswith(f"{SEPARATOR}\n// File: src/Token.sol\n{SEPARATOR}\npragma solidity")
    assert "SPDX-License-Identifier" not in text
    assert "@title" not in text
    assert "no cap" not in text
    assert '"Token // v1"' in text
    assert '"ipfs://Qm/*hash*/"' in text
    assert "'Ownable: caller is not the owner'" in text
    assert "        balanceOf[to] += amount;\n" in text
    for line in text.splitlines():
        assert line.strip()
