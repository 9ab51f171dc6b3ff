"""
Tests pour ExternalLineSorter.

Les tests de comportement utilisent l'utilitaire sort reel (ignores
s'il n'est pas installe) et verifient les proprietes du tri :
en-tete conserve, permutation triee par octets, idempotence.
"""

import random
import shutil
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from mediasort.adapters.file_system import FileSystemAdapter
from mediasort.adapters.imdb.line_sorter import ExternalLineSorter
from mediasort.core.errors import ExternalToolError
from mediasort.core.ports.file_system import IFileSystem

requires_sort = pytest.mark.skipif(shutil.which("sort") is None, reason="sort non installe")


def _split(path: Path) -> tuple[bytes, list[bytes]]:
    """Retourne (en-tete, lignes de donnees) d'un fichier TSV."""
    lines = path.read_bytes().splitlines()
    return lines[0], lines[1:]


class TestBuildCommand:
    """Tests pour la ligne de commande construite."""

    def test_default_command(self):
        assert ExternalLineSorter().build_command() == ["sort"]

    def test_buffer_and_temp_dir(self, tmp_path):
        sorter = ExternalLineSorter(executable="gsort", buffer_size="1G", temp_dir=tmp_path)
        assert sorter.build_command() == ["gsort", "-S", "1G", "-T", str(tmp_path)]

    def test_locale_is_forced_to_c(self, monkeypatch):
        monkeypatch.setenv("LC_ALL", "fr_FR.UTF-8")
        assert ExternalLineSorter._sort_env()["LC_ALL"] == "C"


@requires_sort
class TestSortFile:
    """Tests du tri avec l'utilitaire sort reel."""

    def test_small_file_keeps_every_data_line(self, tmp_path):
        file_path = tmp_path / "title.ratings.tsv"
        file_path.write_bytes(b"tconst\tr\nb\t2\na\t1\n")

        ExternalLineSorter().sort_file(file_path)

        assert file_path.read_bytes() == b"tconst\tr\na\t1\nb\t2\n"

    def test_header_is_preserved(self, unsorted_tsv):
        original_header, original_data = _split(unsorted_tsv)

        ExternalLineSorter().sort_file(unsorted_tsv)

        header, data = _split(unsorted_tsv)
        assert header == original_header
        assert data == sorted(original_data)

    def test_data_lines_are_sorted_permutation(self, unsorted_tsv):
        original = unsorted_tsv.read_bytes().splitlines()[1:]

        ExternalLineSorter().sort_file(unsorted_tsv)

        data = unsorted_tsv.read_bytes().splitlines()[1:]
        assert data == sorted(original)
        # Ordre des octets : les majuscules avant les minuscules
        assert data[0] == b"Zz\t1.0\t1"

    def test_large_file_larger_than_read_buffers(self, tmp_path):
        """Plusieurs centaines de Ko : aucune ligne ne doit etre perdue."""
        rng = random.Random(42)
        data = [
            f"tt{rng.randrange(10_000_000):07d}\t{rng.randrange(100) / 10}\t{n}".encode()
            for n in range(20_000)
        ]
        header = b"tconst\taverageRating\tnumVotes"
        file_path = tmp_path / "title.ratings.tsv"
        file_path.write_bytes(header + b"\n" + b"\n".join(data) + b"\n")
        assert file_path.stat().st_size > 64 * 1024

        ExternalLineSorter().sort_file(file_path)

        sorted_header, sorted_data = _split(file_path)
        assert sorted_header == header
        assert len(sorted_data) == len(data)
        assert sorted_data == sorted(data)

    def test_idempotent(self, unsorted_tsv):
        original_header, original_data = _split(unsorted_tsv)
        sorter = ExternalLineSorter()
        sorter.sort_file(unsorted_tsv)
        once = unsorted_tsv.read_bytes()

        sorter.sort_file(unsorted_tsv)

        assert unsorted_tsv.read_bytes() == once
        assert _split(unsorted_tsv) == (original_header, sorted(original_data))

    def test_no_temp_file_left(self, unsorted_tsv):
        line_count = len(unsorted_tsv.read_bytes().splitlines())

        ExternalLineSorter().sort_file(unsorted_tsv)

        assert not unsorted_tsv.with_name(unsorted_tsv.name + ".sorted").exists()
        assert len(unsorted_tsv.read_bytes().splitlines()) == line_count

    def test_header_only_file(self, tmp_path):
        file_path = tmp_path / "header.tsv"
        file_path.write_bytes(b"tconst\ttitle\n")

        ExternalLineSorter().sort_file(file_path)

        assert file_path.read_bytes() == b"tconst\ttitle\n"

    def test_non_ascii_lines_use_byte_order(self, tmp_path):
        file_path = tmp_path / "akas.tsv"
        file_path.write_bytes(
            "titleId\ttitle\n"
            "tt2\tÉté\n"
            "tt2\tEte\n"
            "tt1\tz\n".encode("utf-8")
        )
        original = file_path.read_bytes().splitlines()[1:]

        ExternalLineSorter().sort_file(file_path)

        data = file_path.read_bytes().splitlines()[1:]
        assert len(data) == 3
        assert data == sorted(original)

    def test_swap_goes_through_file_system(self, unsorted_tsv):
        file_system = MagicMock(spec=IFileSystem, wraps=FileSystemAdapter())
        temp_path = unsorted_tsv.with_name(unsorted_tsv.name + ".sorted")

        ExternalLineSorter(file_system=file_system).sort_file(unsorted_tsv)

        file_system.replace.assert_called_once_with(temp_path, unsorted_tsv)
        file_system.delete.assert_not_called()


class TestFailures:
    """Tests des cas d'erreur."""

    def test_missing_executable(self, unsorted_tsv):
        before = unsorted_tsv.read_bytes()
        sorter = ExternalLineSorter(executable="/nonexistent/sort-binary")

        with pytest.raises(ExternalToolError) as exc_info:
            sorter.sort_file(unsorted_tsv)

        assert exc_info.value.tool == "sort"
        assert unsorted_tsv.read_bytes() == before
        assert not unsorted_tsv.with_name(unsorted_tsv.name + ".sorted").exists()

    def test_missing_file(self, tmp_path):
        with pytest.raises(ExternalToolError):
            ExternalLineSorter().sort_file(tmp_path / "missing.tsv")

    def test_failure_cleans_up_through_file_system(self, unsorted_tsv):
        file_system = MagicMock(spec=IFileSystem, wraps=FileSystemAdapter())
        sorter = ExternalLineSorter(executable="/nonexistent/sort-binary", file_system=file_system)

        with pytest.raises(ExternalToolError):
            sorter.sort_file(unsorted_tsv)

        file_system.delete.assert_called_once_with(
            unsorted_tsv.with_name(unsorted_tsv.name + ".sorted")
        )
        file_system.replace.assert_not_called()

    @requires_sort
    def test_failed_replace_keeps_original(self, unsorted_tsv):
        before = unsorted_tsv.read_bytes()
        file_system = MagicMock(spec=IFileSystem, wraps=FileSystemAdapter())
        file_system.replace.side_effect = PermissionError("read-only")

        with pytest.raises(ExternalToolError):
            ExternalLineSorter(file_system=file_system).sort_file(unsorted_tsv)

        assert unsorted_tsv.read_bytes() == before
        assert not unsorted_tsv.with_name(unsorted_tsv.name + ".sorted").exists()

    @requires_sort
    def test_non_zero_exit_keeps_original(self, unsorted_tsv):
        before = unsorted_tsv.read_bytes()
        # Option invalide : sort se termine en erreur
        sorter = ExternalLineSorter(buffer_size="not-a-size")

        with pytest.raises(ExternalToolError) as exc_info:
            sorter.sort_file(unsorted_tsv)

        assert exc_info.value.returncode != 0
        assert unsorted_tsv.read_bytes() == before
