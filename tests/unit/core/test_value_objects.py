"""
Tests unitaires pour les objets valeur DatasetFile et MediaName.
"""

from pathlib import Path

from mediasort.core.value_objects import DatasetFile, MediaName
from mediasort.core.value_objects.media_name import capitalize_first


class TestDatasetFile:
    """Tests pour DatasetFile."""

    def test_archive_and_tsv_names(self):
        """Les noms d'archive et de TSV derivent du nom du dataset."""
        dataset = DatasetFile("title.akas")
        assert dataset.archive_name == "title.akas.tsv.gz"
        assert dataset.tsv_name == "title.akas.tsv"

    def test_url_with_trailing_slash(self):
        """L'URL ne doit pas contenir de double slash."""
        dataset = DatasetFile("title.ratings")
        assert (
            dataset.url("https://datasets.imdbws.com/")
            == "https://datasets.imdbws.com/title.ratings.tsv.gz"
        )

    def test_url_without_trailing_slash(self):
        dataset = DatasetFile("title.ratings")
        assert (
            dataset.url("https://datasets.imdbws.com")
            == "https://datasets.imdbws.com/title.ratings.tsv.gz"
        )

    def test_paths(self):
        dataset = DatasetFile("title.episode")
        directory = Path("/data")
        assert dataset.archive_path(directory) == Path("/data/title.episode.tsv.gz")
        assert dataset.tsv_path(directory) == Path("/data/title.episode.tsv")


class TestMediaName:
    """Tests pour MediaName."""

    def test_capitalize_first_keeps_rest(self):
        """Seul le premier caractere est modifie."""
        assert capitalize_first("mcDonald") == "McDonald"
        assert capitalize_first("ABC") == "ABC"
        assert capitalize_first("") == ""

    def test_target_filename_complete(self):
        name = MediaName(
            tokens=("the", "show", "S01E02", "1080p", "mkv"),
            cut_point=2,
            quality="1080p",
            episode="S01E02",
        )
        assert name.title == "The Show"
        assert name.target_filename() == "The Show-S01E02-1080p.mkv"

    def test_target_filename_placeholders(self):
        """Les tokens absents sont remplaces par les placeholders."""
        name = MediaName(tokens=("show", "mkv"), cut_point=1)
        assert name.target_filename() == "Show-SXXEXX-UNKNOWNp.mkv"

    def test_extension_keeps_original_case(self):
        name = MediaName(tokens=("show", "MKV"), cut_point=1)
        assert name.extension == "MKV"
        assert name.target_filename().endswith(".MKV")
